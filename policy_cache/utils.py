# policy_cache/utils.py
import logging

import numpy as np


def set_seed(seed: int):
    """Set numpy random seed for reproducibility."""
    np.random.seed(seed)


def sample_zipf_catalog(num_files: int, alpha: float, size: int):
    """
    Sample `size` key requests from a Zipf distribution over a finite catalog.

    Args:
        num_files (int): total number of unique keys in the catalog
        alpha (float): Zipf skew parameter (>0). Higher alpha = more skew.
        size (int): number of requests to generate

    Returns:
        np.ndarray: array of requested key indices [0 .. num_files-1]
    """
    if num_files <= 0:
        raise ValueError(f"num_files must be positive, got {num_files}")
    # ranks 1..N
    ranks = np.arange(1, num_files + 1)
    # unnormalized probabilities ~ 1/r^alpha
    weights = 1.0 / np.power(ranks, alpha)
    probs = weights / weights.sum()
    return np.random.choice(num_files, size=size, p=probs)


def configure_logging(cfg):
    """Root logging setup for the command-line entry points."""
    level = getattr(cfg, "LOG_LEVEL", "INFO")
    fmt = getattr(cfg, "LOG_FORMAT", "%(levelname)s - %(message)s")
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO), format=fmt)
