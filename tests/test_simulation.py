"""Policy comparison harness: workload sampling, runs, sweeps and plots."""

import numpy as np
import pandas as pd
import pytest

from policy_cache import utils
from policy_cache.caching.lru_policy import LRUPolicy
from policy_cache.experiments import run_experiments
from policy_cache.run_all_policies import run_all_policies, summarize
from policy_cache.simulation import policy_sim


def test_sample_zipf_catalog_range_and_skew():
    utils.set_seed(3)
    requests = utils.sample_zipf_catalog(100, 1.2, size=5000)

    assert len(requests) == 5000
    assert requests.min() >= 0
    assert requests.max() < 100
    counts = np.bincount(requests, minlength=100)
    assert counts[0] > counts[50]


def test_sample_zipf_catalog_rejects_empty_catalog():
    with pytest.raises(ValueError):
        utils.sample_zipf_catalog(0, 1.0, size=10)


def test_compute_popularity_orders_by_count():
    ranking, counts = policy_sim.compute_popularity([3, 1, 3, 2, 3, 1])
    assert ranking == [3, 1, 2]
    assert counts[3] == 3


def test_build_cache_uses_configured_policy(small_cfg):
    cache = policy_sim.build_cache(small_cfg)
    assert isinstance(cache.policy, LRUPolicy)
    assert cache.capacity == small_cfg.CACHE_SIZE


def test_build_cache_unknown_policy(small_cfg):
    small_cfg.CACHE_POLICY = "random"
    with pytest.raises(ValueError, match="Unknown CACHE_POLICY"):
        policy_sim.build_cache(small_cfg)


@pytest.mark.parametrize("policy", ["noop", "fifo", "lifo", "lru"])
def test_single_experiment_accounting(small_cfg, policy):
    small_cfg.CACHE_POLICY = policy
    out = policy_sim.run_single_experiment(11, small_cfg)

    assert out["policy"] == policy
    assert out["total_requests"] == small_cfg.NUM_REQUESTS
    assert out["hits"] + out["misses"] == out["total_requests"]
    assert out["final_size"] == small_cfg.CACHE_SIZE
    # every miss inserts; everything beyond capacity was evicted
    assert out["evictions"] == out["misses"] - out["final_size"]
    assert 0.0 <= out["hit_rate"] <= 1.0


def test_single_experiment_is_reproducible(small_cfg):
    first = policy_sim.run_single_experiment(5, small_cfg)
    second = policy_sim.run_single_experiment(5, small_cfg)
    assert first == second


def test_cache_larger_than_catalog_never_evicts(small_cfg):
    small_cfg.CACHE_SIZE = small_cfg.NUM_KEYS
    out = policy_sim.run_single_experiment(2, small_cfg)
    assert out["evictions"] == 0


def test_run_mc_runs_returns_one_row_per_run(small_cfg, capsys):
    df = policy_sim.run_mc_runs(small_cfg)

    assert isinstance(df, pd.DataFrame)
    assert list(df["seed"]) == [7, 8, 9]
    assert "Run 3/3: policy=lru" in capsys.readouterr().out


def test_summarize_preserves_policy_order():
    combined = pd.DataFrame({
        "policy": ["lru", "lru", "fifo"],
        "hit_rate": [0.5, 0.7, 0.4],
        "evictions": [10, 20, 30],
    })

    summary = summarize(combined, ["lru", "fifo"])

    assert list(summary["policy"]) == ["lru", "fifo"]
    assert summary.loc[0, "mean_hit_rate"] == pytest.approx(0.6)
    assert summary.loc[1, "std_hit_rate"] == 0


def test_run_all_policies_writes_outputs(small_cfg, tmp_path):
    small_cfg.NUM_RUNS = 2

    summary = run_all_policies(small_cfg, output_dir=str(tmp_path))

    assert list(summary["policy"]) == ["noop", "fifo", "lifo", "lru"]
    assert small_cfg.CACHE_POLICY == "lru"
    for name in ["results_all_policies.csv", "policy_summary.csv", "results_fifo.csv",
                 "hit_rate_comparison.png", "avg_hit_rate.png", "hit_rate_cdf.png",
                 "avg_evictions.png"]:
        assert (tmp_path / name).exists()


def test_lru_hit_rate_grows_with_cache_size(small_cfg):
    small_cfg.NUM_RUNS = 1

    df = run_experiments.sweep_cache_sizes([5, 20], small_cfg, policies=["lru"])

    assert list(df["cache_size"]) == [5, 20]
    assert list(df["policy"]) == ["lru", "lru"]
    assert df["hit_rate"].iloc[1] >= df["hit_rate"].iloc[0]


def test_sweep_covers_every_policy(small_cfg):
    small_cfg.NUM_RUNS = 1

    df = run_experiments.sweep_cache_sizes([5, 20], small_cfg)

    assert len(df) == 8
    assert list(df["policy"].unique()) == ["noop", "fifo", "lifo", "lru"]
    assert set(df.groupby("policy")["cache_size"].apply(tuple)) == {(5, 20)}


@pytest.mark.parametrize("sweep,param,values", [
    (run_experiments.sweep_cache_sizes, "CACHE_SIZE", [5, 20]),
    (run_experiments.sweep_zipf_alpha, "ZIPF_ALPHA", [0.8, 1.2]),
])
def test_sweeps_restore_config(small_cfg, sweep, param, values):
    small_cfg.NUM_RUNS = 1
    before = getattr(small_cfg, param)

    sweep(values, small_cfg)

    assert getattr(small_cfg, param) == before
    assert small_cfg.CACHE_POLICY == "lru"


def test_sweep_restores_config_when_a_run_fails(small_cfg):
    with pytest.raises(ValueError, match="Unknown CACHE_POLICY"):
        run_experiments.sweep_cache_sizes([5], small_cfg, policies=["lru", "mru"])

    assert small_cfg.CACHE_SIZE == 10
    assert small_cfg.CACHE_POLICY == "lru"


def test_sweep_zipf_alpha_and_plot(small_cfg, tmp_path):
    small_cfg.NUM_RUNS = 1
    df = run_experiments.sweep_zipf_alpha([0.8, 1.2], small_cfg, policies=["fifo", "lru"])
    assert list(df["zipf_alpha"]) == [0.8, 1.2, 0.8, 1.2]
    assert list(df["policy"]) == ["fifo", "fifo", "lru", "lru"]

    target = tmp_path / "zipf_vs_hit.png"
    run_experiments.plot_results(df, "zipf_alpha", "hit_rate", "Hit Rate", "Zipf", str(target))
    assert target.exists()
