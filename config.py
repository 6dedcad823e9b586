"""Configuration settings for the Letter Grader."""

import os
import logging
from typing import Final, List, Tuple

# Debug flag: 1 = debug mode (verbose logging), 0 = production mode
DEBUG: Final[int] = int(os.environ.get("GRADER_DEBUG", "0"))

# --- File Paths ---
# Used when the command line does not supply exactly an input and an output path
DEFAULT_INPUT_FILE: Final[str] = os.environ.get("GRADER_INPUT_FILE", "input.txt")
DEFAULT_OUTPUT_FILE: Final[str] = os.environ.get("GRADER_OUTPUT_FILE", "output.txt")
# Define log file path within a /logs subdirectory
LOG_DIR: Final[str] = "logs"
LOG_FILE: Final[str] = os.environ.get("GRADER_LOG_FILE", os.path.join(LOG_DIR, "grader_app.log"))

# --- Roster Input Settings ---

DELIMITER: Final[str] = ","
MINIMUM_SCORE: Final[int] = 0
MAXIMUM_SCORE: Final[int] = 100

# --- Grading Scheme ---

# One weight per graded component, in column order. Must sum to 1.0.
TEST_WEIGHTS: Final[List[float]] = [0.1, 0.1, 0.1, 0.1, 0.2, 0.15, 0.25]
TEST_NAMES: Final[List[str]] = ["Quiz 1", "Quiz 2", "Quiz 3", "Quiz 4", "Mid 1", "Mid 2", "Final"]
# Highest threshold first; the last entry is the catch-all.
GRADE_THRESHOLDS: Final[List[Tuple[float, str]]] = [
    (90, "A"),
    (80, "B"),
    (70, "C"),
    (60, "D"),
    (0, "F"),
]

# --- Report Formatting ---

NAME_WIDTH: Final[int] = 20 # Fixed space for the name
GRADE_WIDTH: Final[int] = 5 # Fixed space for the grade
STATS_COLUMN_WIDTH: Final[int] = 8
STATS_PRECISION: Final[int] = 2
STAT_NAMES: Final[List[str]] = ["Average", "Minimum", "Maximum"]
REPORT_HEADER_TEMPLATE: Final[str] = "Letter grade for {count} students given in {input_path} is:\n\n"

# --- Logging Configuration ---
# LOG_LEVEL is used for file logging, console logging is only enabled in DEBUG mode
LOG_LEVEL = logging.DEBUG if DEBUG else logging.INFO
# Structured log format: timestamp, level, logger, module.function:line, message
LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(module)s.%(funcName)s:%(lineno)d | %(message)s'

# Basic check
if __name__ == "__main__":
    print(f"Debug Mode: {'On' if DEBUG else 'Off'}")
    print(f"Log Level: {logging.getLevelName(LOG_LEVEL)}")
    print(f"Default Input File: {DEFAULT_INPUT_FILE}")
    print(f"Default Output File: {DEFAULT_OUTPUT_FILE}")
    print(f"Log File: {LOG_FILE}")
    print(f"Score Range: {MINIMUM_SCORE}-{MAXIMUM_SCORE}")
    print("Components:")
    for weight, name in zip(TEST_WEIGHTS, TEST_NAMES):
        print(f"- {name}: {weight}")
    print("Thresholds:")
    for threshold, letter in GRADE_THRESHOLDS:
        print(f"- {letter}: >= {threshold}")
