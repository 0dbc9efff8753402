"""friendnet — an in-memory friendship network with graph views and traversals."""

__version__ = "0.1.0"
