from __future__ import annotations

from pathlib import Path
from typing import List, Union

# <project_root>/src/gedcom_validator/utils/pathing.py
_PROJECT_ROOT = Path(__file__).resolve().parents[3]

GEDCOM_SUFFIX = ".ged"


def project_root() -> Path:
    """
    Return the source checkout root (the directory holding src/, config/
    and mock_files/).
    """
    return _PROJECT_ROOT


def resolve_project_path(relative: Union[str, Path]) -> Path:
    """
    Resolve a path relative to the project root.

    Examples:
        resolve_project_path("mock_files/family.ged")
        resolve_project_path(Path("config") / "gedcom_validator.yml")
    """
    return project_root() / Path(relative)


def mock_file_path(filename: Union[str, Path]) -> Path:
    """Absolute path of a sample file under mock_files/."""
    return resolve_project_path(Path("mock_files") / filename)


def gedcom_files_in(directory: Union[str, Path]) -> List[Path]:
    """Sorted ``*.ged`` files directly inside ``directory`` (suffix match is case-insensitive)."""
    directory = Path(directory)
    if not directory.is_dir():
        raise NotADirectoryError(f"Not a directory: {directory}")
    return sorted(
        p for p in directory.iterdir()
        if p.is_file() and p.suffix.lower() == GEDCOM_SUFFIX
    )
