# policy_cache/exceptions.py
"""Errors raised by the bounded cache and its eviction policies."""


class CacheError(Exception):
    """Base class for all cache errors."""


class InvalidCapacityError(CacheError, ValueError):
    """Cache constructed with a capacity that is not a positive integer."""

    def __init__(self, capacity):
        self.capacity = capacity
        super().__init__(f"Cache capacity must be a positive integer, got {capacity!r}.")


class InvalidPolicyError(CacheError, ValueError):
    """Policy object cannot be owned by a new cache."""


class KeyNotFoundError(CacheError, KeyError):
    """Lookup of a key that is not cached."""

    def __init__(self, key):
        self.key = key
        super().__init__(key)

    def __str__(self):
        return f"Key not found in cache: {self.key!r}"


class EmptyPolicyError(CacheError, RuntimeError):
    """
    Replacement candidate requested from a policy tracking no keys.
    The cache never asks for a candidate unless it is full, so this
    signals a bookkeeping bug rather than a recoverable condition.
    """

    def __init__(self, policy_name: str):
        self.policy_name = policy_name
        super().__init__(f"No keys available for eviction ({policy_name}).")
