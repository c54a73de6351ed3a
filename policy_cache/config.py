"""Policy comparison configuration parameters (baseline)."""

# Random seed for reproducibility
RANDOM_SEED = 2025

# ------------------------------
# Key catalog & workload
# ------------------------------
NUM_KEYS = 2000         # total unique keys that can be requested
ZIPF_ALPHA = 1.0        # Zipf skew parameter. 1.0 = strong skew (few keys are very hot)
NUM_REQUESTS = 10000    # lookups replayed per run

# ------------------------------
# Cache
# ------------------------------
CACHE_SIZE = 200        # ~10% of the catalog

# Eviction policy options: "noop", "fifo", "lifo", "lru"
CACHE_POLICY = "lru"

# ------------------------------
# Monte Carlo runs
# ------------------------------
NUM_RUNS = 20           # repeat runs for averaging

# ------------------------------
# Logging
# ------------------------------
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - [%(name)s] - %(levelname)s - %(message)s"
