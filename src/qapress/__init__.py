"""qapress: publish questions with tags and sanitized markdown bodies."""

__version__ = "0.1.0"
