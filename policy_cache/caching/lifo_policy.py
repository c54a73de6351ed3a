# policy_cache/caching/lifo_policy.py
from collections import OrderedDict
from typing import Hashable, TypeVar

from policy_cache.exceptions import EmptyPolicyError
from .policy_base import EvictionPolicy

K = TypeVar("K", bound=Hashable)


class LIFOPolicy(EvictionPolicy[K]):
    """Last-In, First-Out: evicts the most recently inserted key."""

    name = "lifo"

    def __init__(self):
        self._stack: "OrderedDict[K, None]" = OrderedDict()

    def insert(self, key: K) -> None:
        if key not in self._stack:
            self._stack[key] = None

    def touch(self, key: K) -> None:
        pass

    def erase(self, key: K) -> None:
        self._stack.pop(key, None)

    def replacement_candidate(self) -> K:
        if not self._stack:
            raise EmptyPolicyError(self.name)
        # top of the stack is the newest end
        return next(reversed(self._stack))

    def __len__(self) -> int:
        return len(self._stack)

    def __contains__(self, key: object) -> bool:
        return key in self._stack
