"""Sort integers on two stacks with a fixed set of push, swap and rotate operations."""

__version__ = "1.0.0"