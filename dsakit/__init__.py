"""Readable implementations of array, recursion, bit, graph, stack and tree algorithms."""

__version__ = "0.1.0"
__all__ = ["arrays", "bits", "graphs", "recursion", "stacks", "trees"]