"""Agent Board: a small community bulletin board API."""

__version__ = "0.1.0"
