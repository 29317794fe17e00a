from .pathing import (
    gedcom_files_in,
    mock_file_path,
    project_root,
    resolve_project_path,
)

__all__ = [
    "gedcom_files_in",
    "mock_file_path",
    "project_root",
    "resolve_project_path",
]
