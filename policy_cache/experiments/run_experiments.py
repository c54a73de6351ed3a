# policy_cache/experiments/run_experiments.py
import pandas as pd
import matplotlib.pyplot as plt
from policy_cache.caching.registry import POLICIES
from policy_cache.simulation import policy_sim
from policy_cache.utils import configure_logging
from policy_cache import config as cfg


def _sweep(cfg, param, column, values, policies=None):
    """
    Mean hit rate and evictions for every (policy, value) pair.
    cfg.CACHE_POLICY and cfg.<param> are restored afterwards.
    """
    policies = list(policies or POLICIES)
    saved = (cfg.CACHE_POLICY, getattr(cfg, param))
    results = []
    try:
        for pol in policies:
            cfg.CACHE_POLICY = pol
            for value in values:
                setattr(cfg, param, value)
                df = policy_sim.run_mc_runs(cfg)
                results.append({
                    "policy": pol,
                    column: value,
                    "hit_rate": df["hit_rate"].mean(),
                    "evictions": df["evictions"].mean(),
                })
    finally:
        cfg.CACHE_POLICY, restored = saved
        setattr(cfg, param, restored)
    return pd.DataFrame(results)


def sweep_cache_sizes(sizes, cfg, policies=None):
    return _sweep(cfg, "CACHE_SIZE", "cache_size", sizes, policies)


def sweep_zipf_alpha(alphas, cfg, policies=None):
    return _sweep(cfg, "ZIPF_ALPHA", "zipf_alpha", alphas, policies)


def plot_results(df, x, y, ylabel, title, filename):
    """One line per policy when the frame has a policy column."""
    plt.figure()
    if "policy" in df:
        for pol, subset in df.groupby("policy", sort=False):
            plt.plot(subset[x], subset[y], marker="o", label=pol)
        plt.legend()
    else:
        plt.plot(df[x], df[y], marker="o")
    plt.xlabel(x)
    plt.ylabel(ylabel)
    plt.title(title)
    plt.grid(True)
    plt.savefig(filename)
    plt.close()
    print(f"Saved plot: {filename}")


if __name__ == "__main__":
    configure_logging(cfg)
    cache_sizes = [50, 100, 200, 300, 400, 500]
    zipf_alphas = [0.6, 0.8, 1.0, 1.2, 1.4]

    print("Running cache size sweep...")
    df_cache = sweep_cache_sizes(cache_sizes, cfg)
    df_cache.to_csv("sweep_cache_size.csv", index=False)
    plot_results(df_cache, "cache_size", "hit_rate", "Hit Rate", "Cache Size vs Hit Rate", "cache_vs_hit.png")
    plot_results(df_cache, "cache_size", "evictions", "Evictions per Run", "Cache Size vs Evictions", "cache_vs_evictions.png")

    print("Running Zipf alpha sweep...")
    df_zipf = sweep_zipf_alpha(zipf_alphas, cfg)
    df_zipf.to_csv("sweep_zipf_alpha.csv", index=False)
    plot_results(df_zipf, "zipf_alpha", "hit_rate", "Hit Rate", "Zipf Alpha vs Hit Rate", "zipf_vs_hit.png")
    plot_results(df_zipf, "zipf_alpha", "evictions", "Evictions per Run", "Zipf Alpha vs Evictions", "zipf_vs_evictions.png")
