"""
Immutable configuration objects for networks and training runs.

Both accept a plain mapping through ``from_options``. Keys may use the
snake_case field names or the camelCase spellings (``hiddenActivator``,
``learningRate``, ...). Unknown keys are rejected rather than ignored.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Any, Callable, Mapping, Optional

from .activations import Activator
from .errors import ConfigurationError

DEFAULT_LEARNING_RATE = 0.1
DEFAULT_EPOCHS = 100
DEFAULT_LOG_EVERY = 10

_ALIASES = {
    "hiddenActivator": "hidden_activator",
    "outputActivator": "output_activator",
    "learningRate": "learning_rate",
    "gradientChecking": "gradient_checking",
    "logEvery": "log_every",
}


def _normalize(cls, options: Mapping[str, Any]) -> dict:
    known = {f.name for f in fields(cls)}
    normalized = {}
    for key, value in options.items():
        name = _ALIASES.get(key, key)
        if name not in known:
            raise ConfigurationError(f"unknown {cls.__name__} option {key!r}")
        if name in normalized:
            raise ConfigurationError(f"option {name!r} given more than once")
        normalized[name] = value
    return normalized


@dataclass(frozen=True)
class NetworkConfig:
    hidden_activator: Activator = Activator.SIGMOID
    output_activator: Activator = Activator.SIGMOID
    regularization: float = 0.0

    def __post_init__(self):
        # activators may arrive as names; store the resolved members
        object.__setattr__(self, "hidden_activator", Activator.resolve(self.hidden_activator))
        object.__setattr__(self, "output_activator", Activator.resolve(self.output_activator))
        reg = self.regularization
        if isinstance(reg, bool) or not isinstance(reg, (int, float)) or not math.isfinite(reg) or reg < 0:
            raise ConfigurationError(f"regularization must be a finite number >= 0, got {reg!r}")

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None) -> NetworkConfig:
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls(**_normalize(cls, options))


@dataclass(frozen=True)
class TrainingConfig:
    learning_rate: float = DEFAULT_LEARNING_RATE
    epochs: int = DEFAULT_EPOCHS
    gradient_checking: Optional[Callable[[int, list], Any]] = None
    log_every: int = DEFAULT_LOG_EVERY

    def __post_init__(self):
        lr = self.learning_rate
        if isinstance(lr, bool) or not isinstance(lr, (int, float)) or not math.isfinite(lr) or lr <= 0:
            raise ConfigurationError(f"learning_rate must be a finite number > 0, got {lr!r}")
        for name in ("epochs", "log_every"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
        if self.gradient_checking is not None and not callable(self.gradient_checking):
            raise ConfigurationError("gradient_checking must be callable or None")

    @classmethod
    def from_options(cls, options=None, **overrides) -> TrainingConfig:
        if options is None:
            merged = {}
        elif isinstance(options, cls):
            merged = {f.name: getattr(options, f.name) for f in fields(cls)}
        else:
            merged = _normalize(cls, options)
        merged.update(_normalize(cls, overrides))
        return cls(**merged)
