# policy_cache/caching/registry.py
from typing import Dict, Type

from .policy_base import EvictionPolicy, NoOpPolicy
from .fifo_policy import FIFOPolicy
from .lifo_policy import LIFOPolicy
from .lru_policy import LRUPolicy

POLICIES: Dict[str, Type[EvictionPolicy]] = {
    NoOpPolicy.name: NoOpPolicy,
    FIFOPolicy.name: FIFOPolicy,
    LIFOPolicy.name: LIFOPolicy,
    LRUPolicy.name: LRUPolicy,
}


def make_policy(name: str) -> EvictionPolicy:
    """Build a fresh, empty policy from its config name (e.g. "lru")."""
    try:
        policy_cls = POLICIES[name.strip().lower()]
    except KeyError:
        known = ", ".join(sorted(POLICIES))
        raise ValueError(f"Unknown CACHE_POLICY: {name!r} (expected one of: {known})") from None
    return policy_cls()
