"""Solutions to programming challenges and a small generic tree model."""

__version__ = "0.1.0"