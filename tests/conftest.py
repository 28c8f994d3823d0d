"""Shared test fixtures."""

from pathlib import Path
import sys

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


INPUTS = {
    "bustle.txt": (
        "The bustle in a house\n"
        "The morning after death\n"
        "Is solemnest of industries\n"
        "Enacted upon earth,--\n"
        "\n"
        "The sweeping up the heart,\n"
        "And putting love away\n"
        "We shall not want to use again\n"
        "Until eternity.\n"
    ),
    "empty.txt": "",
    "fox.txt": "The quick brown fox jumps over the lazy dog.\n",
    "nobody.txt": (
        "I'm Nobody! Who are you?\n"
        "Are you—Nobody—too?\n"
        "Then there's a pair of us!\n"
        "Don't tell! they'd advertise—you know!\n"
        "\n"
        "How dreary—to be—Somebody!\n"
        "How public—like a Frog—\n"
        "To tell one's name—the livelong June—\n"
        "To an admiring Bog!\n"
    ),
}


@pytest.fixture
def inputs_dir(tmp_path: Path) -> Path:
    """A directory holding the four sample input files."""
    root = tmp_path / "inputs"
    root.mkdir()
    for name, text in INPUTS.items():
        (root / name).write_text(text, encoding="utf-8", newline="")
    return root


@pytest.fixture
def write_file(tmp_path: Path):
    """Write raw text to a file under tmp_path and return its path as a string."""

    def _write(name: str, text: str) -> str:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8", newline="")
        return str(path)

    return _write
