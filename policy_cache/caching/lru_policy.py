# policy_cache/caching/lru_policy.py
from collections import OrderedDict
from typing import Hashable, List, TypeVar

from policy_cache.exceptions import EmptyPolicyError
from .policy_base import EvictionPolicy

K = TypeVar("K", bound=Hashable)


class LRUPolicy(EvictionPolicy[K]):
    """
    Least Recently Used implementation using an OrderedDict.

    The dict keeps a key -> list-node index over a doubly linked list, so
    touch and erase reposition or unlink a key in O(1). Order runs from
    least to most recently used.
    """

    name = "lru"

    def __init__(self):
        self._recency: "OrderedDict[K, None]" = OrderedDict()

    def insert(self, key: K) -> None:
        if key in self._recency:
            return  # already tracked, recency left alone
        self._recency[key] = None

    def touch(self, key: K) -> None:
        if key in self._recency:
            self._recency.move_to_end(key)  # mark as most recently used

    def erase(self, key: K) -> None:
        self._recency.pop(key, None)

    def replacement_candidate(self) -> K:
        if not self._recency:
            raise EmptyPolicyError(self.name)
        # first item is the least recently used
        return next(iter(self._recency))

    def recency_order(self) -> List[K]:
        """Keys from least to most recently used."""
        return list(self._recency)

    def __len__(self) -> int:
        return len(self._recency)

    def __contains__(self, key: object) -> bool:
        return key in self._recency
