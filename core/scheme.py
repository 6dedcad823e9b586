"""Immutable grading scheme: component weights and letter thresholds."""

import math
from dataclasses import dataclass
from typing import Iterable, Tuple

import config
from utils.error_handler import ConfigError


@dataclass(frozen=True)
class GradingScheme:
    """Weights per component and the ordered threshold/letter table.

    Attributes:
        weights: ``(weight, component_name)`` pairs in score column order.
            Weights are non-negative and sum to 1.0.
        thresholds: ``(threshold, letter)`` pairs, strictly descending, the
            last one at 0 so every weighted sum in range gets a letter.
    """
    weights: Tuple[Tuple[float, str], ...]
    thresholds: Tuple[Tuple[float, str], ...]

    def __post_init__(self):
        # Accept lists from callers but store tuples
        object.__setattr__(self, "weights", tuple((float(w), str(n)) for w, n in self.weights))
        object.__setattr__(self, "thresholds", tuple((float(t), str(letter)) for t, letter in self.thresholds))

        if not self.weights:
            raise ConfigError("Grading scheme needs at least one weighted component")
        if any(weight < 0 for weight, _ in self.weights):
            raise ConfigError("Grading scheme weights must be non-negative")
        total = math.fsum(weight for weight, _ in self.weights)
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ConfigError(f"Grading scheme weights must sum to 1.0, got {total}")

        if not self.thresholds:
            raise ConfigError("Grading scheme needs at least one threshold")
        values = [threshold for threshold, _ in self.thresholds]
        if any(upper <= lower for upper, lower in zip(values, values[1:])):
            raise ConfigError("Grading scheme thresholds must be strictly descending")
        if values[-1] != 0:
            raise ConfigError("The last grading threshold must be 0")
        if any(not letter for _, letter in self.thresholds):
            raise ConfigError("Every grading threshold needs a letter")

    @classmethod
    def from_lists(
        cls,
        weights: Iterable[float],
        component_names: Iterable[str],
        thresholds: Iterable[Tuple[float, str]],
    ) -> "GradingScheme":
        weights = list(weights)
        component_names = list(component_names)
        if len(weights) != len(component_names):
            raise ConfigError(
                f"Got {len(weights)} weights but {len(component_names)} component names"
            )
        return cls(weights=tuple(zip(weights, component_names)), thresholds=tuple(thresholds))

    @property
    def component_count(self) -> int:
        return len(self.weights)

    @property
    def weight_values(self) -> Tuple[float, ...]:
        return tuple(weight for weight, _ in self.weights)

    @property
    def component_names(self) -> Tuple[str, ...]:
        return tuple(name for _, name in self.weights)

    def letter_for(self, weighted_sum: float) -> str:
        """Letter of the first threshold at or below ``weighted_sum``."""
        for threshold, letter in self.thresholds:
            if threshold <= weighted_sum:
                return letter
        # Only reachable for a negative sum
        return self.thresholds[-1][1]


DEFAULT_SCHEME = GradingScheme.from_lists(config.TEST_WEIGHTS, config.TEST_NAMES, config.GRADE_THRESHOLDS)
