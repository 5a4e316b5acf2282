"""Good Commit - a git hook that helps you write good commit messages."""

__version__ = "0.1.0"
