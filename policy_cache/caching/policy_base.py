# policy_cache/caching/policy_base.py
from abc import ABC, abstractmethod
from typing import Generic, Hashable, Set, TypeVar

from policy_cache.exceptions import EmptyPolicyError

K = TypeVar("K", bound=Hashable)


class EvictionPolicy(ABC, Generic[K]):
    """
    Key-only bookkeeping that decides which key a full cache drops next.

    Policies never see values. The owning cache calls insert/erase so the
    tracked key set always mirrors its own entries, and touch after every
    successful lookup or in-place update.
    """

    name = "base"

    @abstractmethod
    def insert(self, key: K) -> None:
        """Start tracking `key`. Re-inserting a tracked key changes nothing."""

    @abstractmethod
    def touch(self, key: K) -> None:
        """Record an access to `key`. Unknown keys are ignored."""

    @abstractmethod
    def erase(self, key: K) -> None:
        """Stop tracking `key`. Unknown keys are ignored."""

    @abstractmethod
    def replacement_candidate(self) -> K:
        """Return the key to evict next; raise EmptyPolicyError if none."""

    @abstractmethod
    def __len__(self) -> int:
        pass

    @abstractmethod
    def __contains__(self, key: object) -> bool:
        pass

    def __repr__(self):
        return f"{type(self).__name__}(tracked={len(self)})"


class NoOpPolicy(EvictionPolicy[K]):
    """
    Policy without an eviction rule: keys sit in a plain set and any
    member may be handed out as the replacement candidate.
    """

    name = "noop"

    def __init__(self):
        self._keys: Set[K] = set()

    def insert(self, key: K) -> None:
        self._keys.add(key)

    def touch(self, key: K) -> None:
        # accesses don't matter here
        pass

    def erase(self, key: K) -> None:
        self._keys.discard(key)

    def replacement_candidate(self) -> K:
        if not self._keys:
            raise EmptyPolicyError(self.name)
        return next(iter(self._keys))

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: object) -> bool:
        return key in self._keys
