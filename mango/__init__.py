"""Create man pages from the documentation of Go packages."""

__version__ = "0.1.0"
