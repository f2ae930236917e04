from .markup import render, sanitize

__all__ = ["render", "sanitize"]
