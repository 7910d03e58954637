"""Graph, tree, string and array algorithms as plain functions and classes."""

__version__ = "0.1.0"