"""Formats graded rosters and class statistics as fixed-width text."""

from typing import List, Sequence

import config
from core.roster import Roster
from core.statistics import ClassStatistics
from utils.error_handler import GradeError


def format_grade_line(name: str, grade: str, name_width: int = config.NAME_WIDTH, grade_width: int = config.GRADE_WIDTH) -> str:
    return f"{name:<{name_width}}{grade:>{grade_width}}\n"


def format_grade_report(roster: Roster, input_path: str) -> str:
    """Builds the output file text: a header then one ``name grade`` line per record.

    Records are written in current roster order, so sort the roster first.

    Raises:
        GradeError: If a record has not been graded yet.
    """
    parts = [config.REPORT_HEADER_TEMPLATE.format(count=roster.count(), input_path=input_path)]
    for record in roster:
        if not record.is_graded:
            raise GradeError(f"Student {record.name} has no letter grade to report")
        parts.append(format_grade_line(record.name, record.grade))
    return "".join(parts)


def format_statistics_rows(
    stats: ClassStatistics,
    component_names: Sequence[str],
    column_width: int = config.STATS_COLUMN_WIDTH,
    precision: int = config.STATS_PRECISION,
) -> List[str]:
    """Renders the component header row and the Average/Minimum/Maximum rows."""
    header = " " * column_width + "".join(f"{name:<{column_width}}" for name in component_names)
    rows = [header]
    for label, values in zip(config.STAT_NAMES, stats.rows()):
        cells = "".join(f"{value:<{column_width}.{precision}f}" for value in values)
        rows.append(f"{label:<{column_width}}{cells}")
    return rows
