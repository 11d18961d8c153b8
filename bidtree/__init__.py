"""Bids in a binary search tree, a small CSV reader and a client service-choice console."""

__version__ = "1.0.0"
__all__ = ["csvparser", "tree", "clients"]