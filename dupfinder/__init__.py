"""Find duplicate files in a directory tree by size and content."""

__version__ = "0.1.0"