from .cache import CacheEntry, TTLCache

__all__ = ["CacheEntry", "TTLCache"]
