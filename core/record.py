"""Student record model and the line parser that builds it."""

import re
from dataclasses import dataclass, field
from typing import List, Optional

import config
from core.tokenizer import FieldCursor
from utils.error_handler import EmptyName, InvalidScore
from utils.logger import get_logger

logger = get_logger()

# Base-10 integer with an optional sign; rejects "", "7.5", "1_000"
_INTEGER_PATTERN = re.compile(r"[+-]?\d+")


@dataclass
class Record:
    """One student: name, scores in component order, and the derived letter grade."""
    name: str
    scores: List[int] = field(default_factory=list)
    grade: Optional[str] = None

    @property
    def is_graded(self) -> bool:
        return self.grade is not None


def parse_score(text: str, min_score: int = config.MINIMUM_SCORE, max_score: int = config.MAXIMUM_SCORE) -> int:
    """Converts one score field to an int within ``[min_score, max_score]``.

    Raises:
        InvalidScore: If the field is not an integer or is out of range.
    """
    if not _INTEGER_PATTERN.fullmatch(text):
        raise InvalidScore(text, min_score, max_score)
    value = int(text)
    if value < min_score or value > max_score:
        raise InvalidScore(value, min_score, max_score)
    return value


def parse_record(
    line: Optional[str],
    delimiter: str = config.DELIMITER,
    min_score: int = config.MINIMUM_SCORE,
    max_score: int = config.MAXIMUM_SCORE,
) -> Record:
    """Parses ``name,score,score,...`` into an ungraded Record.

    Args:
        line: The raw roster line.
        delimiter: Field separator.
        min_score: Lowest accepted score.
        max_score: Highest accepted score.

    Returns:
        A Record with ``grade`` unset.

    Raises:
        ParseError: If ``line`` is None.
        EmptyName: If the first field is empty after trimming.
        InvalidScore: If any score field is non-numeric, empty, or out of range.
    """
    cursor = FieldCursor(line, delimiter)
    name = cursor.next_field()
    if not name:
        raise EmptyName()

    scores = [parse_score(text, min_score, max_score) for text in cursor]
    logger.debug(f"Parsed record for '{name}' with {len(scores)} scores.")
    return Record(name=name, scores=scores)
