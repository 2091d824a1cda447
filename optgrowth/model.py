# -*- coding: utf-8 -*-
"""
Parameters and capital grid of the log-utility / Cobb-Douglas growth model.

    V(k) = max_c { log(c) + β V(k^α - c) }

with full depreciation, so next period's capital is whatever output is not
consumed.
"""

import json
import logging
import numbers
import os
from dataclasses import dataclass, field, fields

import numpy as np

from optgrowth.exceptions import InvalidParameter

logger = logging.getLogger(__name__)

# Aliases accepted by load_model for keys that are awkward to type
_KEY_ALIASES = {"alpha": "α", "beta": "β"}


@dataclass(frozen=True)
class LogGrowthModel:
    """
    Optimal growth model with log utility and production

        y = f(k) = k^α


    The class holds parameters and the capital grid. Instances are immutable.

    Attributes:
        α: Capital share, in (0, 1). Default 0.65.
        β: Discount factor, in (0, 1). Default 0.95.
        kmin: Smallest grid point, > 0 so that log utility stays finite. Default 0.01.
        kmax: Largest grid point, > kmin. Default 2.0.
        nk: Number of evenly spaced grid points, >= 2. Default 150.
        kgrid: Read-only array of the nk grid points, kmin and kmax included.
    """

    α: float = 0.65
    β: float = 0.95
    kmin: float = 0.01
    kmax: float = 2.0
    nk: int = 150
    kgrid: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not 0.0 < self.α < 1.0:
            raise InvalidParameter(f"α must be in (0, 1), got {self.α}")
        if not 0.0 < self.β < 1.0:
            raise InvalidParameter(f"β must be in (0, 1), got {self.β}")
        if not self.kmin > 0.0:
            raise InvalidParameter(f"kmin must be positive, got {self.kmin}")
        if not self.kmax > self.kmin:
            raise InvalidParameter(
                f"kmax must exceed kmin, got kmin={self.kmin}, kmax={self.kmax}"
            )
        if isinstance(self.nk, bool) or not isinstance(self.nk, numbers.Integral):
            raise InvalidParameter(f"nk must be an integer, got {self.nk!r}")
        if self.nk < 2:
            raise InvalidParameter(f"nk must be at least 2, got {self.nk}")

        grid = np.linspace(self.kmin, self.kmax, self.nk)
        grid.setflags(write=False)
        object.__setattr__(self, "kgrid", grid)

    def u(self, c):
        " Utility "
        return np.log(c)

    def f(self, k):
        " Production function "
        return k**self.α


def make_model(**params):
    """
    Build a LogGrowthModel from keyword parameters, falling back to the
    documented default for every field not given.

    Unknown keys raise InvalidParameter instead of being ignored.
    """
    valid_keys = {f.name for f in fields(LogGrowthModel) if f.init}
    params = {_KEY_ALIASES.get(k, k): v for k, v in params.items()}
    unknown = set(params) - valid_keys
    if unknown:
        raise InvalidParameter(f"Unknown model parameters: {sorted(unknown)}")
    return LogGrowthModel(**params)


def load_model(filename, key=None):
    """
    Load model parameters from a JSON file.

    Args:
        filename: Path to the JSON file.
        key: Optional top-level key under which the parameters are nested.

    Returns:
        LogGrowthModel built from the file, or the default model if the file
        or the key does not exist.
    """
    if not os.path.exists(filename):
        logger.warning("Model config file '%s' not found. Using defaults.", filename)
        return LogGrowthModel()

    try:
        with open(filename, "r", encoding="utf-8") as fh:
            data = json.load(fh)
    except json.JSONDecodeError as e:
        raise InvalidParameter(f"Error reading model config {filename}: {e}") from e

    if key is not None:
        if key not in data:
            logger.warning("Key '%s' not in %s. Using defaults.", key, filename)
            return LogGrowthModel()
        data = data[key]

    if not isinstance(data, dict):
        raise InvalidParameter(f"Model config in {filename} must be a JSON object")

    valid_keys = {f.name for f in fields(LogGrowthModel) if f.init}
    data = {_KEY_ALIASES.get(k, k): v for k, v in data.items()}
    filtered = {k: v for k, v in data.items() if k in valid_keys}
    return make_model(**filtered)
