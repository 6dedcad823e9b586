"""Main execution script for the Letter Grader."""

import sys
import os
from typing import List, Optional, Tuple

from dotenv import load_dotenv

# Load variables from .env into the environment before config reads them
load_dotenv()

# Ensure the project root directory is in the Python path
PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import config
from utils.logger import setup_logger
from utils.error_handler import (BaseGraderException, ConfigError, EmptyRoster, GradeError,
                                 ParseError, RosterFileError)
from core.grader import Grader
from services.roster_files import RosterFileService
import ui.cli as cli

# Initialize logger as early as possible after config is loaded
logger = setup_logger()

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

def resolve_paths(argv: List[str]) -> Tuple[str, str]:
    """Picks the input and output paths from the positional arguments.

    Exactly two arguments are expected. Any other count falls back to the
    configured default file names instead of aborting.
    """
    if len(argv) == 2:
        logger.info("Using read and write file names provided in the command line arguments.")
        return argv[0], argv[1]

    logger.warning(f"Command line argument format not supported ({len(argv)} arguments); using default file names.")
    cli.display_warning("Command line argument format not supported.")
    cli.display_info("Application will use default read and write file names!")
    return config.DEFAULT_INPUT_FILE, config.DEFAULT_OUTPUT_FILE

def main(argv: Optional[List[str]] = None) -> int:
    """Runs the grading workflow and returns the process exit status."""
    if argv is None:
        argv = sys.argv[1:]

    logger.info("Starting Letter Grader main workflow.")
    cli.display_welcome()

    try:
        # --- Step 1: Resolve Files ---
        cli.display_step(1, "Resolving input and output files...")
        input_path, output_path = resolve_paths(argv)
        cli.display_info(f"Input will be read from '{input_path}'")
        cli.display_info(f"Output will be written to '{output_path}'")

        # --- Step 2: Grade Roster ---
        cli.display_step(2, "Calculating letter grades...")
        grader = Grader(RosterFileService())
        result = grader.process(input_path, output_path)
        cli.display_success(f"Student data read from input file '{input_path}'.")
        cli.display_success(f"Letter grade has been calculated for all {result.student_count} students.")
        cli.display_success(f"Student letter grades written to output file '{output_path}'.")

        # --- Step 3: Class Statistics ---
        cli.display_step(3, "Displaying class statistics...")
        cli.display_statistics(result.statistics_rows)
        return EXIT_SUCCESS

    except RosterFileError as e:
        logger.error(f"File Error: {e}", exc_info=config.DEBUG)
        cli.display_error(f"File Error: {e}")
    except ParseError as e:
        logger.error(f"Roster Parse Error: {e}", exc_info=config.DEBUG)
        cli.display_error(f"Invalid roster line: {e}")
    except GradeError as e:
        logger.error(f"Grading Error: {e}", exc_info=config.DEBUG)
        cli.display_error(f"Grading Error: {e}")
    except EmptyRoster as e:
        logger.error(f"Statistics Error: {e}", exc_info=config.DEBUG)
        cli.display_error(f"Statistics Error: {e}")
    except ConfigError as e:
        logger.critical(f"Configuration Error: {e}", exc_info=config.DEBUG)
        cli.display_error(f"Setup Error: {e}")
    except BaseGraderException as e:
        logger.error(f"Grader Error: {e}", exc_info=config.DEBUG)
        cli.display_error(str(e))
    except KeyboardInterrupt:
        logger.info("Operation interrupted by user (Ctrl+C).")
        cli.display_warning("Operation interrupted.")
    except Exception as e:
        # Catch-all for unexpected errors
        logger.critical(f"An unexpected error occurred: {e}", exc_info=True)
        cli.display_error(f"An unexpected error occurred: {e}. Check logs for details.")
    finally:
        cli.display_farewell()

    return EXIT_FAILURE

if __name__ == "__main__":
    sys.exit(main())
