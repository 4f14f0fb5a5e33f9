"""Sort integers on two stacks with a small instruction set, with ASCII text helpers."""

__version__ = "0.1.0"
__all__ = ["__version__"]