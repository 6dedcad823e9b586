"""Reads roster input files and writes grade reports."""

import os
from typing import List

from utils.error_handler import RosterFileError
from utils.logger import get_logger

logger = get_logger()

class RosterFileService:
    """Provides file access for the grading pipeline."""

    def __init__(self, encoding: str = "utf-8"):
        """Initializes the RosterFileService.

        Args:
            encoding: Text encoding used for both reading and writing.
        """
        self.encoding = encoding
        logger.debug(f"RosterFileService initialized (encoding={encoding}).")

    def read_lines(self, path: str) -> List[str]:
        """Reads the data lines of a roster file.

        Line terminators are removed and lines that are blank after trimming are
        skipped.

        Args:
            path: Path of the roster file.

        Returns:
            The non-blank lines in file order.

        Raises:
            RosterFileError: If the file cannot be opened or is empty.
        """
        logger.info(f"Reading roster from '{path}'...")
        try:
            if os.path.getsize(path) == 0:
                raise RosterFileError(f"File '{path}' is empty", path=path)
            with open(path, "r", encoding=self.encoding) as handle:
                raw_lines = handle.read().splitlines()
        except RosterFileError:
            raise
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to open '{path}' for read operation: {e}", exc_info=True)
            raise RosterFileError(f"Failed to open '{path}' file for read operation", path=path) from e

        lines = [line for line in raw_lines if line.strip()]
        skipped = len(raw_lines) - len(lines)
        if skipped:
            logger.debug(f"Skipped {skipped} blank line(s) in '{path}'.")
        logger.info(f"Student data read from input file '{path}' ({len(lines)} lines).")
        return lines

    def write_report(self, path: str, text: str) -> None:
        """Writes ``text`` to ``path``, replacing any existing content.

        Raises:
            RosterFileError: If the file cannot be opened or written.
        """
        logger.info(f"Writing grade report to '{path}'...")
        try:
            with open(path, "w", encoding=self.encoding) as handle:
                handle.write(text)
        except OSError as e:
            logger.error(f"Failed to write '{path}': {e}", exc_info=True)
            raise RosterFileError(f"Failed to open '{path}' file for write operation", path=path) from e
        logger.info(f"Student letter grades written to output file '{path}'.")
