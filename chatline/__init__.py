"""Chatline: a messaging backend with conversations, groups and threaded comments."""

__version__ = "1.0.0"
