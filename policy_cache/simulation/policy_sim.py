# policy_cache/simulation/policy_sim.py
import logging
import time
from collections import Counter

import pandas as pd

from policy_cache.utils import set_seed, sample_zipf_catalog, configure_logging
from policy_cache.caching.bounded_cache import BoundedCache
from policy_cache.caching.registry import make_policy

logger = logging.getLogger(__name__)


def compute_popularity(requests):
    cnt = Counter(int(r) for r in requests)
    sorted_items = [item for item, _ in cnt.most_common()]
    return sorted_items, cnt


def build_cache(cfg, on_erase=None):
    """Cache sized and configured from cfg.CACHE_SIZE / cfg.CACHE_POLICY."""
    policy = make_policy(cfg.CACHE_POLICY)
    return BoundedCache(cfg.CACHE_SIZE, policy=policy, on_erase=on_erase)


def run_single_experiment(seed, cfg):
    set_seed(seed)

    requests = sample_zipf_catalog(cfg.NUM_KEYS, cfg.ZIPF_ALPHA, size=cfg.NUM_REQUESTS)
    ranking, _ = compute_popularity(requests)

    evicted = []
    cache = build_cache(cfg, on_erase=lambda key, value: evicted.append(key))

    # --- Replay: hit refreshes the policy, miss loads the key ---
    hits = 0
    for key in requests:
        key = int(key)
        _, found = cache.try_get(key)
        if found:
            hits += 1
        else:
            cache.put(key, f"value-{key}")

    total_requests = len(requests)
    hit_rate = hits / total_requests if total_requests > 0 else 0.0

    return {
        "seed": seed,
        "policy": cfg.CACHE_POLICY,
        "total_requests": total_requests,
        "hits": hits,
        "hit_rate": hit_rate,
        "misses": total_requests - hits,
        "evictions": len(evicted),
        "final_size": cache.size(),
        "top_popular": ranking[:10],
    }


def run_mc_runs(cfg):
    results = []
    for run in range(cfg.NUM_RUNS):
        seed = cfg.RANDOM_SEED + run
        out = run_single_experiment(seed, cfg)
        results.append(out)
        print(
            f"Run {run+1}/{cfg.NUM_RUNS}: "
            f"policy={cfg.CACHE_POLICY}, "
            f"hit_rate={out['hit_rate']:.4f}, "
            f"misses={out['misses']}, "
            f"evictions={out['evictions']}"
        )
    logger.debug("Finished %d runs for policy %s", cfg.NUM_RUNS, cfg.CACHE_POLICY)
    return pd.DataFrame(results)


if __name__ == "__main__":
    from policy_cache import config as cfg
    configure_logging(cfg)
    t0 = time.time()
    df = run_mc_runs(cfg)
    print("\nSummary:")
    print(df[["seed", "hit_rate", "evictions", "total_requests"]].to_string(index=False))
    print(f"\nMean hit_rate = {df['hit_rate'].mean():.4f} (std={df['hit_rate'].std():.4f})")
    print(f"Elapsed: {time.time()-t0:.2f}s")
