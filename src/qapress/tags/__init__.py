from .normalize import clean_tag_names, find_tag_id, resolve

__all__ = ["clean_tag_names", "find_tag_id", "resolve"]
