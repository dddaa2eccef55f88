"""Create a release on GitHub and upload a directory of build artifacts to it."""

__version__ = "0.1.0"
