"""Environment-driven settings for JSONLogic Lab."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

ENV_PREFIX = "JSONLOGIC_LAB_"

DEFAULT_ITERATIONS = 3
DEFAULT_DATASET_SIZE = 100
DEFAULT_LARGE_DATASET_SIZE = 50_000
DEFAULT_DETAIL_LIMIT = 100

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _get_int(environ: Mapping[str, str], key: str, default: int, minimum: int = 1) -> int:
    raw = environ.get(ENV_PREFIX + key)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{key} must be an integer, got {raw!r}")
    if value < minimum:
        raise ValueError(f"{ENV_PREFIX}{key} must be >= {minimum}, got {value}")
    return value


@dataclass(frozen=True)
class LabSettings:
    """Settings for a benchmark session."""

    iterations: int = DEFAULT_ITERATIONS
    seed: Optional[int] = None
    dataset_size: int = DEFAULT_DATASET_SIZE
    large_dataset_size: int = DEFAULT_LARGE_DATASET_SIZE
    detail_limit: int = DEFAULT_DETAIL_LIMIT
    fail_fast: bool = False
    results_dir: Path = Path("results")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LabSettings":
        """Build settings from environment variables.

        Call ``load_dotenv()`` first to pick up a ``.env`` file.
        """
        env = os.environ if environ is None else environ

        seed_raw = env.get(ENV_PREFIX + "SEED")
        seed = None
        if seed_raw is not None and seed_raw.strip() != "":
            try:
                seed = int(seed_raw)
            except ValueError:
                raise ValueError(f"{ENV_PREFIX}SEED must be an integer, got {seed_raw!r}")

        return cls(
            iterations=_get_int(env, "ITERATIONS", DEFAULT_ITERATIONS),
            seed=seed,
            dataset_size=_get_int(env, "DATASET_SIZE", DEFAULT_DATASET_SIZE),
            large_dataset_size=_get_int(env, "LARGE_DATASET_SIZE", DEFAULT_LARGE_DATASET_SIZE),
            detail_limit=_get_int(env, "DETAIL_LIMIT", DEFAULT_DETAIL_LIMIT, minimum=0),
            fail_fast=env.get(ENV_PREFIX + "FAIL_FAST", "").strip().lower() in _TRUE_VALUES,
            results_dir=Path(env.get(ENV_PREFIX + "RESULTS_DIR", "results")),
        )

    def to_dict(self) -> dict:
        """Convert settings to dictionary."""
        return {
            "iterations": self.iterations,
            "seed": self.seed,
            "dataset_size": self.dataset_size,
            "large_dataset_size": self.large_dataset_size,
            "detail_limit": self.detail_limit,
            "fail_fast": self.fail_fast,
            "results_dir": str(self.results_dir),
        }
