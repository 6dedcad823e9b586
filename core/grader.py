"""Core logic for turning a roster file into letter grades and class statistics."""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

import config
from core.calculator import grade_all
from core.record import parse_record
from core.report import format_grade_report, format_statistics_rows
from core.roster import Roster
from core.scheme import DEFAULT_SCHEME, GradingScheme
from core.statistics import ClassStatistics, StatisticsEngine
from services.roster_files import RosterFileService
from utils.error_handler import ParseError
from utils.logger import get_logger

logger = get_logger()


@dataclass
class GradingResult:
    """Everything one run produces: the graded roster and both reports."""
    roster: Roster
    report_text: str
    statistics: ClassStatistics
    statistics_rows: List[str] = field(default_factory=list)

    @property
    def student_count(self) -> int:
        return self.roster.count()


class Grader:
    """Orchestrates parsing, grading, sorting and reporting for one roster."""

    def __init__(
        self,
        file_service: Optional[RosterFileService] = None,
        scheme: GradingScheme = DEFAULT_SCHEME,
        delimiter: str = config.DELIMITER,
    ):
        """Initializes the Grader with its file service and grading scheme."""
        self.file_service = file_service or RosterFileService()
        self.scheme = scheme
        self.delimiter = delimiter
        logger.info("Grader initialized with %d graded components.", scheme.component_count)

    def build_roster(self, lines: Iterable[str]) -> Roster:
        """Parses every line into a new Roster, stopping at the first bad line.

        Raises:
            ParseError: (or a subclass) for the first line that cannot be parsed.
        """
        roster = Roster()
        for line_number, line in enumerate(lines, start=1):
            try:
                record = parse_record(line, self.delimiter)
            except ParseError as e:
                logger.error(f"Line {line_number} could not be parsed: {e}")
                raise
            roster.append(record)
        logger.info(f"Built roster with {roster.count()} records.")
        return roster

    def grade_lines(self, lines: Iterable[str], input_path: str) -> GradingResult:
        """Runs the whole pipeline over already-read roster lines.

        Args:
            lines: Raw roster lines, one student each.
            input_path: Input file name echoed in the report header.

        Returns:
            The sorted, graded roster with its report text and statistics.
        """
        roster = self.build_roster(lines)
        grade_all(roster, self.scheme)
        roster.sort_by_name()
        report_text = format_grade_report(roster, input_path)

        engine = StatisticsEngine(roster)
        statistics = engine.summarize(self.scheme.component_count)
        rows = format_statistics_rows(statistics, self.scheme.component_names)
        return GradingResult(roster=roster, report_text=report_text, statistics=statistics, statistics_rows=rows)

    def process(self, input_path: str, output_path: str) -> GradingResult:
        """Reads ``input_path``, grades it and writes the report to ``output_path``."""
        logger.info(f"Starting grading run: '{input_path}' -> '{output_path}'.")
        lines = self.file_service.read_lines(input_path)
        result = self.grade_lines(lines, input_path)
        self.file_service.write_report(output_path, result.report_text)
        logger.info(f"Finished grading run for {result.student_count} students.")
        return result
