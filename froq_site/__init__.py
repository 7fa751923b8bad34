"""froq-site: the Froq! Framework documentation website."""

__version__ = "0.1.0"
