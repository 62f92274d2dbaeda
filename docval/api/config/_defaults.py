"""Built-in configuration defaults (private)."""

DEFAULT_EXTENSIONS = [".md", ".markdown"]
DEFAULT_EXCLUDE = [".git/**", "node_modules/**"]

# A whole line such as "<!-- guide: locators -->" starts a new sub-document
DEFAULT_SEPARATOR = r"^\s*<!--\s*guide\s*:\s*(?P<name>[^>]*?)\s*-->\s*$"

DEFAULT_CONFIG_FILENAME = ".validate-docs.json"
