"""Weighted grade calculation for single records and whole rosters."""

import math

from core.record import Record
from core.roster import Roster
from core.scheme import DEFAULT_SCHEME, GradingScheme
from utils.error_handler import ScoreCountMismatch
from utils.logger import get_logger

logger = get_logger()

# Sums are rounded so that float noise cannot push a boundary score under its threshold
SUM_PRECISION = 9


def weighted_sum(record: Record, scheme: GradingScheme = DEFAULT_SCHEME) -> float:
    """Returns the sum of each score times its component weight.

    Raises:
        ScoreCountMismatch: If the record does not have one score per component.
    """
    required = scheme.component_count
    if len(record.scores) != required:
        raise ScoreCountMismatch(record.name, len(record.scores), required)
    total = math.fsum(score * weight for score, weight in zip(record.scores, scheme.weight_values))
    return round(total, SUM_PRECISION)


def grade(record: Record, scheme: GradingScheme = DEFAULT_SCHEME) -> str:
    """Derives the letter grade for ``record`` and stores it on the record.

    Returns:
        The assigned letter.

    Raises:
        ScoreCountMismatch: If the record does not have one score per component.
    """
    total = weighted_sum(record, scheme)
    letter = scheme.letter_for(total)
    record.grade = letter
    logger.debug(f"Graded '{record.name}': weighted sum {total} -> {letter}")
    return letter


def grade_all(roster: Roster, scheme: GradingScheme = DEFAULT_SCHEME) -> None:
    """Grades every record in current roster order.

    Stops at the first record that cannot be graded and re-raises its error.
    Records graded before the failure keep their letters.
    """
    graded = 0
    for record in roster:
        try:
            grade(record, scheme)
        except ScoreCountMismatch as e:
            logger.error(f"Grading stopped at '{record.name}' after {graded} record(s): {e}")
            raise
        graded += 1
    logger.info(f"Letter grade calculated for all {graded} students.")
