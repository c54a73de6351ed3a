import os

import pandas as pd
import matplotlib.pyplot as plt
import numpy as np
from policy_cache import config
from policy_cache.caching.registry import POLICIES
from policy_cache.simulation import policy_sim
from policy_cache.utils import configure_logging


def summarize(combined, policies):
    summary = combined.groupby("policy").agg(
        mean_hit_rate=("hit_rate", "mean"),
        std_hit_rate=("hit_rate", "std"),
        mean_evictions=("evictions", "mean"),
        std_evictions=("evictions", "std")
    ).reset_index()

    summary = summary.fillna(0)  # single run -> NaN std
    summary = summary.set_index("policy").loc[policies].reset_index()  # preserve order
    return summary


def plot_hit_rates(combined, summary, policies, output_dir="."):
    """Per-run line plot, average bar chart and CDF of hit rates."""
    saved = []

    plt.figure(figsize=(10, 5))
    for pol in policies:
        subset = combined[combined["policy"] == pol]
        plt.plot(subset["run_idx"], subset["hit_rate"], marker="o", label=f"{pol}")
    plt.title("Eviction Policies: Hit Rate (per run)")
    plt.xlabel("Simulation Run")
    plt.ylabel("Hit Rate")
    plt.legend()
    plt.grid(True)
    saved.append(os.path.join(output_dir, "hit_rate_comparison.png"))
    plt.savefig(saved[-1], dpi=150)
    plt.close()

    plt.figure(figsize=(8, 5))
    plt.bar(summary["policy"], summary["mean_hit_rate"],
            yerr=summary["std_hit_rate"], capsize=5)
    plt.title("Average Hit Rate per Policy")
    plt.ylabel("Hit Rate")
    saved.append(os.path.join(output_dir, "avg_hit_rate.png"))
    plt.savefig(saved[-1], dpi=150)
    plt.close()

    plt.figure(figsize=(8, 5))
    for pol in policies:
        subset = combined[combined["policy"] == pol]["hit_rate"].sort_values()
        yvals = np.arange(1, len(subset)+1) / float(len(subset))
        plt.plot(subset, yvals, label=pol)
    plt.title("CDF of Hit Rates")
    plt.xlabel("Hit Rate")
    plt.ylabel("Cumulative Probability")
    plt.grid(True)
    plt.legend()
    saved.append(os.path.join(output_dir, "hit_rate_cdf.png"))
    plt.savefig(saved[-1], dpi=150)
    plt.close()

    return saved


def plot_evictions(summary, output_dir="."):
    plt.figure(figsize=(8, 5))
    plt.bar(summary["policy"], summary["mean_evictions"],
            yerr=summary["std_evictions"], capsize=5, color="orange")
    plt.title("Average Evictions per Policy")
    plt.ylabel("Evictions per Run")
    path = os.path.join(output_dir, "avg_evictions.png")
    plt.savefig(path, dpi=150)
    plt.close()
    return path


def run_all_policies(cfg=config, policies=None, output_dir="."):
    policies = list(policies or POLICIES)
    original_policy = cfg.CACHE_POLICY
    all_results = []

    try:
        for pol in policies:
            print(f"\n=== Running policy: {pol} ===")
            cfg.CACHE_POLICY = pol
            df = policy_sim.run_mc_runs(cfg)
            df["run_idx"] = range(1, len(df) + 1)  # per-policy run index
            df.to_csv(os.path.join(output_dir, f"results_{pol}.csv"), index=False)
            all_results.append(df)
    finally:
        cfg.CACHE_POLICY = original_policy

    combined = pd.concat(all_results, ignore_index=True)
    combined.to_csv(os.path.join(output_dir, "results_all_policies.csv"), index=False)
    print("\nAll results saved to results_all_policies.csv")

    summary = summarize(combined, policies)
    summary.to_csv(os.path.join(output_dir, "policy_summary.csv"), index=False)
    print("\nPolicy summary saved to policy_summary.csv")
    print(summary)

    best_hit = summary.loc[summary["mean_hit_rate"].idxmax()]
    print("\nBest Policy:")
    print(f"   - Highest Hit Rate: {best_hit['policy']} "
          f"(avg={best_hit['mean_hit_rate']:.4f}, std={best_hit['std_hit_rate']:.4f})")

    saved = plot_hit_rates(combined, summary, policies, output_dir)
    saved.append(plot_evictions(summary, output_dir))
    print("\nPlots saved:")
    for path in saved:
        print(f"   {path}")

    return summary


if __name__ == "__main__":
    configure_logging(config)
    run_all_policies()
