from setuptools import find_packages, setup

setup(
    name="validate-docs",
    version="0.1.0",
    description="Link integrity checker for Markdown guide corpora",
    packages=find_packages(include=["docval", "docval.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer<0.26",  # CLI (0.26+ vendors click; code catches upstream click exceptions)
        "click>=8.2",  # Typer's command layer, used directly for exceptions
        "pydantic>=2",  # Config and output schemas
        "rich",  # Terminal formatting and log handler
        "pyyaml",  # YAML report output
        "pygments",  # Highlighting JSON/YAML on a TTY
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "validate-docs=docval.cli:main",
        ],
    },
)
