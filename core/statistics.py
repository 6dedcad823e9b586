"""Per-component class statistics over a roster."""

from dataclasses import dataclass, field
from typing import List

import config
from core.roster import Roster
from utils.error_handler import EmptyRoster, ScoreCountMismatch


@dataclass
class ClassStatistics:
    """Average, minimum and maximum for each component, in component order."""
    averages: List[float] = field(default_factory=list)
    minimums: List[int] = field(default_factory=list)
    maximums: List[int] = field(default_factory=list)

    def rows(self) -> List[List[float]]:
        """The three value rows in report order."""
        return [list(self.averages), list(self.minimums), list(self.maximums)]


class StatisticsEngine:
    """Computes column aggregates of ``scores[i]`` across every record.

    Each call walks the whole roster again; nothing is cached, so results track
    any change made to the roster between calls.
    """

    def __init__(self, roster: Roster, min_score: int = config.MINIMUM_SCORE, max_score: int = config.MAXIMUM_SCORE):
        self.roster = roster
        self.min_score = min_score
        self.max_score = max_score

    def _column(self, index: int) -> List[int]:
        if index < 0:
            raise ValueError(f"Component index must be non-negative, got {index}")
        column = []
        for record in self.roster:
            if index >= len(record.scores):
                raise ScoreCountMismatch(record.name, len(record.scores), index + 1)
            column.append(record.scores[index])
        return column

    def average(self, index: int) -> float:
        """Arithmetic mean of component ``index``.

        Raises:
            EmptyRoster: If the roster has no records.
        """
        column = self._column(index)
        if not column:
            raise EmptyRoster()
        return sum(column) / len(column)

    def minimum(self, index: int) -> int:
        """Smallest score for component ``index``; ``max_score`` on an empty roster."""
        lowest = self.max_score
        for score in self._column(index):
            if score < lowest:
                lowest = score
        return lowest

    def maximum(self, index: int) -> int:
        """Largest score for component ``index``; ``min_score`` on an empty roster."""
        highest = self.min_score
        for score in self._column(index):
            if score > highest:
                highest = score
        return highest

    def summarize(self, component_count: int) -> ClassStatistics:
        """Computes all three statistics for components ``0..component_count-1``."""
        stats = ClassStatistics()
        for index in range(component_count):
            stats.averages.append(self.average(index))
            stats.minimums.append(self.minimum(index))
            stats.maximums.append(self.maximum(index))
        return stats
