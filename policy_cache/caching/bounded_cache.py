# policy_cache/caching/bounded_cache.py
import logging
from typing import (Callable, Dict, Generic, Hashable, Iterator, MutableMapping,
                    Optional, Tuple, TypeVar)

from policy_cache.exceptions import (InvalidCapacityError, InvalidPolicyError,
                                     KeyNotFoundError)
from .policy_base import EvictionPolicy, NoOpPolicy

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

EraseCallback = Callable[[K, V], None]


def _ignore_erase(key, value):
    pass


class BoundedCache(Generic[K, V]):
    """
    Fixed-size key-value cache with a pluggable eviction policy.

    The cache owns the key -> value storage and enforces the capacity; the
    policy only tracks keys and names the victim when a new key arrives at
    a full cache. Every insert/erase on the storage is mirrored on the
    policy, so both always hold the same key set.

    Args:
        capacity (int): maximum number of entries, fixed for the cache's life
        policy (EvictionPolicy): empty policy instance, owned by this cache
            (defaults to NoOpPolicy)
        on_erase (callable): called as on_erase(key, value) once for every
            entry dropped by eviction or remove(); not called by clear()
        storage_factory (callable): builds the backing mapping (default dict)
    """

    def __init__(self, capacity: int,
                 policy: Optional[EvictionPolicy] = None,
                 on_erase: Optional[EraseCallback] = None,
                 storage_factory: Callable[[], MutableMapping] = dict):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise InvalidCapacityError(capacity)
        if policy is None:
            policy = NoOpPolicy()
        elif not isinstance(policy, EvictionPolicy):
            raise InvalidPolicyError(f"Expected an EvictionPolicy, got {type(policy).__name__}.")
        elif len(policy):
            raise InvalidPolicyError(f"Policy already tracks {len(policy)} keys; pass a fresh instance.")

        self._capacity = capacity
        self._policy = policy
        self._on_erase = on_erase if on_erase is not None else _ignore_erase
        self._entries: MutableMapping[K, V] = storage_factory()
        if len(self._entries):
            raise InvalidPolicyError(
                f"Storage already holds {len(self._entries)} entries unknown to the policy; "
                "storage_factory must return an empty mapping.")
        self.hits = 0
        self.misses = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def policy(self) -> EvictionPolicy:
        return self._policy

    def put(self, key: K, value: V) -> None:
        """Insert or update an entry, evicting the policy's candidate if full."""
        if key in self._entries:
            self._policy.touch(key)
            self._entries[key] = value
            return

        if len(self._entries) >= self._capacity:
            victim = self._policy.replacement_candidate()
            logger.debug("Evicting %r (%s policy)", victim, self._policy.name)
            self._erase(victim)

        self._policy.insert(key)
        self._entries[key] = value

    def try_get(self, key: K) -> Tuple[Optional[V], bool]:
        """Return (value, True) on a hit, (None, False) on a miss."""
        if key in self._entries:
            self.hits += 1
            self._policy.touch(key)
            return self._entries[key], True
        self.misses += 1
        return None, False

    def get(self, key: K) -> V:
        """Like try_get, but a miss raises KeyNotFoundError."""
        value, found = self.try_get(key)
        if not found:
            raise KeyNotFoundError(key)
        return value

    def cached(self, key: K) -> bool:
        """Membership check only: no stats, no policy update."""
        return key in self._entries

    def size(self) -> int:
        return len(self._entries)

    def remove(self, key: K) -> bool:
        """Drop `key` if present. Returns True if it was cached."""
        if key not in self._entries:
            return False
        self._erase(key)
        return True

    def clear(self) -> None:
        """Drop every entry without calling on_erase."""
        for key in self._entries:
            self._policy.erase(key)
        logger.debug("Cleared %d entries", len(self._entries))
        self._entries.clear()

    def items(self) -> Iterator[Tuple[K, V]]:
        """(key, value) pairs in storage order, not eviction order."""
        return iter(self._entries.items())

    def stats(self) -> Dict[str, float]:
        return {
            "capacity": self._capacity,
            "size": len(self._entries),
            "hits": self.hits,
            "misses": self.misses,
            "hit_rate": self.hit_rate(),
        }

    def hit_rate(self) -> float:
        requests = self.hits + self.misses
        return self.hits / requests if requests > 0 else 0.0

    def _erase(self, key: K) -> None:
        value = self._entries.pop(key)
        self._policy.erase(key)
        self._on_erase(key, value)

    def __contains__(self, key: object) -> bool:
        return self.cached(key)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[K]:
        return iter(self._entries)

    def __getitem__(self, key: K) -> V:
        return self.get(key)

    def __setitem__(self, key: K, value: V) -> None:
        self.put(key, value)

    def __repr__(self):
        return (f"{type(self).__name__}(capacity={self._capacity}, size={len(self._entries)}, "
                f"policy={self._policy.name})")
