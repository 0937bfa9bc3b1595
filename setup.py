from setuptools import find_packages, setup

setup(
    name="mdlinkcheck",
    version="0.1.0",
    description="Validate internal links and anchors in Markdown documentation",
    packages=find_packages(include=["mdlinkcheck", "mdlinkcheck.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer>=0.9,<0.26",  # Command-line interface
        "click>=8.0",  # Usage errors raised by the CLI
        "rich",  # Terminal formatting
        "pydantic>=2",  # Configuration models
        "markdown-it-py>=3",  # Markdown parsing
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
        ],
    },
    entry_points={
        "console_scripts": [
            "mdlinkcheck=mdlinkcheck.cli:main",
        ],
    },
)
