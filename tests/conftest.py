import sys
from datetime import date
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from gedcom_tree.parser_core import parse  # noqa: E402
from gedcom_tree.utils import mock_file_path  # noqa: E402

TODAY = date(2026, 10, 18)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def family_text() -> str:
    return mock_file_path("family_1.ged").read_text(encoding="utf-8")


@pytest.fixture
def family_dataset(family_text):
    return parse(family_text, today=TODAY)
