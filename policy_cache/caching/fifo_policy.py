# policy_cache/caching/fifo_policy.py
from collections import OrderedDict
from typing import Hashable, TypeVar

from policy_cache.exceptions import EmptyPolicyError
from .policy_base import EvictionPolicy

K = TypeVar("K", bound=Hashable)


class FIFOPolicy(EvictionPolicy[K]):
    """
    First-In, First-Out: the oldest inserted key is evicted first.
    Accesses never change the order.
    """

    name = "fifo"

    def __init__(self):
        # key -> None, oldest first
        self._queue: "OrderedDict[K, None]" = OrderedDict()

    def insert(self, key: K) -> None:
        if key in self._queue:
            return  # keep original insertion position
        self._queue[key] = None

    def touch(self, key: K) -> None:
        pass

    def erase(self, key: K) -> None:
        self._queue.pop(key, None)

    def replacement_candidate(self) -> K:
        if not self._queue:
            raise EmptyPolicyError(self.name)
        return next(iter(self._queue))

    def __len__(self) -> int:
        return len(self._queue)

    def __contains__(self, key: object) -> bool:
        return key in self._queue
