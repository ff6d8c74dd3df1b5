"""Application services: file discovery and scan orchestration."""

from todo_mapper.services.file_discovery import (
    DiscoveredFile,
    discover_files,
    get_compile_files_for_project,
    get_project_files_for_solution,
    read_file_content,
)
from todo_mapper.services.scanning_service import ScanningService

__all__ = [
    "DiscoveredFile",
    "ScanningService",
    "discover_files",
    "get_compile_files_for_project",
    "get_project_files_for_solution",
    "read_file_content",
]
