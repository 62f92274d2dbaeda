"""validate-docs: link integrity checker for Markdown guide corpora."""
