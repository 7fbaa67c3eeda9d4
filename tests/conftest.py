import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

EXAMPLE_LINES = [
    "0 @I1@ INDI",
    "1 NAME John",
    "0 @I2@ INDI",
    "1 NAME Ann",
    "0 @I3@ INDI",
    "1 NAME Sam",
    "1 FAMC @F1@",
    "0 @F1@ FAM",
    "1 HUSB @I1@",
    "1 WIFE @I2@",
    "1 CHIL @I3@",
]


@pytest.fixture
def example_lines():
    """Three individuals and one family linking them as parents and child."""
    return list(EXAMPLE_LINES)


@pytest.fixture
def example_tree(example_lines):
    from gedcom_graph import parse

    return parse(example_lines)


@pytest.fixture
def example_graph(example_tree):
    from gedcom_graph import build_graph

    return build_graph(example_tree)
