# policy_cache/main.py
from policy_cache.simulation.policy_sim import run_mc_runs
from policy_cache.utils import configure_logging
from policy_cache import config


def main():
    configure_logging(config)
    df = run_mc_runs(config)
    out = f"results_{config.CACHE_POLICY}.csv"
    df.to_csv(out, index=False)
    print(f"Results saved to {out}")


if __name__ == "__main__":
    main()
