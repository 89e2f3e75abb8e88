"""
YAML configuration for the verification harness.

Configuration files follow configs/default.yaml; only the `verification`
section is read. Missing keys fall back to the defaults below.
"""

import numbers
import warnings
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional, Union

import yaml

from normpack.utils.metrics import EPSILON


@dataclass(frozen=True)
class VerifyConfig:
    """
    Settings for a verification run.

    Args:
        epsilon: Per-component round-trip tolerance
        num_random: Number of random normals to test after the known ones
        seed: Random seed (None for a different sample every run)
        sweep_samples: Number of random packed words to scan for NaN decodes
        verbose: Print one line per tested vector
    """
    epsilon: float = EPSILON
    num_random: int = 100
    seed: Optional[int] = None
    sweep_samples: int = 0
    verbose: bool = True

    def __post_init__(self):
        if isinstance(self.epsilon, bool) or not isinstance(self.epsilon, numbers.Real):
            raise ValueError(f"epsilon must be a number, got {self.epsilon!r}")
        for name in ('num_random', 'sweep_samples'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if self.seed is not None and (
            isinstance(self.seed, bool) or not isinstance(self.seed, numbers.Integral)
        ):
            raise ValueError(f"seed must be an integer or null, got {self.seed!r}")
        if not isinstance(self.verbose, bool):
            raise ValueError(f"verbose must be true or false, got {self.verbose!r}")

        if not self.epsilon > 0:
            raise ValueError(f"epsilon must be positive, got {self.epsilon}")
        if self.num_random < 0:
            raise ValueError(f"num_random must be non-negative, got {self.num_random}")
        if self.sweep_samples < 0:
            raise ValueError(f"sweep_samples must be non-negative, got {self.sweep_samples}")

    def override(self, **kwargs) -> "VerifyConfig":
        """Returns a copy with every non-None keyword applied."""
        return replace(self, **{k: v for k, v in kwargs.items() if v is not None})


def load_config(path: Optional[Union[str, Path]] = None) -> VerifyConfig:
    """
    Loads a VerifyConfig from a YAML file.

    Args:
        path: Path to a YAML file, or None for the built-in defaults

    Returns:
        Validated VerifyConfig

    Raises:
        FileNotFoundError: If path does not exist
        ValueError: If the file is malformed or a value is out of range
    """
    if path is None:
        return VerifyConfig()

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise ValueError(f"Config file must contain a mapping, got {type(config).__name__}")

    section = config.get('verification') or {}
    if not isinstance(section, dict):
        raise ValueError("'verification' section must be a mapping")

    known = {f.name for f in fields(VerifyConfig)}
    unknown = sorted(set(section) - known)
    if unknown:
        warnings.warn(f"Ignoring unknown verification settings in {path}: {', '.join(unknown)}")

    return VerifyConfig(**{k: v for k, v in section.items() if k in known})
