import os
import sys
import tempfile
from pathlib import Path

import pytest

# Keep test runs from writing logs into the project tree
os.environ.setdefault("GRADER_LOG_FILE", os.path.join(tempfile.gettempdir(), "letter_grader_tests.log"))

# Add the project root to sys.path so config, core, services, ui and utils import
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from core.record import Record  # noqa: E402
from core.roster import Roster  # noqa: E402
from core.scheme import DEFAULT_SCHEME  # noqa: E402


SAMPLE_LINES = [
    "Mary Jones,95,92,88,90,85,91,94",
    "Adam Smith,60,60,60,60,60,60,60",
    "Zoe Brown,0,0,0,0,0,0,0",
    "Carl Diaz,80,82,78,85,79,81,83",
]


# Common test fixtures
@pytest.fixture
def scheme():
    """Return the default seven-component grading scheme."""
    return DEFAULT_SCHEME


@pytest.fixture
def sample_lines():
    """Return a copy of the sample roster lines."""
    return list(SAMPLE_LINES)


@pytest.fixture
def roster():
    """Return a roster of three students with a single score each."""
    return Roster([
        Record("Bob", [70]),
        Record("alice", [80]),
        Record("Carol", [90]),
    ])


@pytest.fixture
def input_file(tmp_path: Path, sample_lines):
    """Write the sample roster to a temp file and return its path."""
    path = tmp_path / "input.txt"
    path.write_text("\n".join(sample_lines) + "\n", encoding="utf-8")
    return path
