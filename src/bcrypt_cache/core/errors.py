"""Errors reported through the cache warning channel.

None of these are raised to callers of BcryptCache. They are handed to the
warning listener, together with the underlying exception when there is one.
"""


class CacheError(Exception):
    """Base class for cache layer failures."""


class CacheLookupError(CacheError):
    """Reading from the cache failed."""


class CacheWriteError(CacheError):
    """Adding a value to the cache failed."""


class CacheRemoveError(CacheError):
    """Removing a value from the cache failed."""


class MissingParameterError(CacheError, TypeError):
    """A required argument was None."""
