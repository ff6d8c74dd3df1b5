"""File discovery utilities for walking codebases, solutions and projects."""

import hashlib
import os
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path

from todo_mapper.config import get_settings
from todo_mapper.logging import get_logger
from todo_mapper.parsers import get_front_end_registry

logger = get_logger(__name__)

# Directories to always skip
SKIP_DIRECTORIES = frozenset({
    ".git",
    ".svn",
    ".hg",
    ".vs",
    "node_modules",
    "__pycache__",
    ".pytest_cache",
    ".mypy_cache",
    ".ruff_cache",
    "venv",
    ".venv",
    "env",
    ".env",
    "target",
    "build",
    "dist",
    "bin",  # .NET build output
    "obj",  # .NET intermediate output
    ".idea",
    ".vscode",
})

# Project("{type-guid}") = "Name", "relative\path.csproj", "{project-guid}"
_SOLUTION_PROJECT_PATTERN = re.compile(
    r'Project\("\{\w{8}-\w{4}-\w{4}-\w{4}-\w{12}\}"\) = "(.*?)", '
    r'"(?P<project_file>(.*?\.csproj))", "\{\w{8}-\w{4}-\w{4}-\w{4}-\w{12}\}"'
)

_CSHARP_EXTENSION = ".cs"


@dataclass(frozen=True, slots=True)
class DiscoveredFile:
    """A file discovered for scanning."""

    relative_path: str
    absolute_path: str
    size_bytes: int


def compute_file_hash(content: bytes) -> str:
    """Compute SHA-256 hash of file content."""
    return hashlib.sha256(content).hexdigest()


def discover_files(root_path: str) -> list[DiscoveredFile]:
    """
    Walk a directory tree and discover scannable files.

    Respects SKIP_DIRECTORIES and filters by supported extensions.
    Returns files sorted by path.
    """
    settings = get_settings()
    registry = get_front_end_registry()
    supported_extensions = set(registry.supported_extensions)

    root = Path(root_path).resolve()
    if not root.is_dir():
        raise ValueError(f"Root path is not a directory: {root_path}")

    discovered: list[DiscoveredFile] = []

    for dirpath, dirnames, filenames in os.walk(root):
        # Filter out directories we should skip (in-place modification)
        dirnames[:] = [d for d in dirnames if d not in SKIP_DIRECTORIES]

        for filename in filenames:
            ext = Path(filename).suffix.lower()
            if ext not in supported_extensions:
                continue

            abs_path = Path(dirpath) / filename

            try:
                size = abs_path.stat().st_size
            except OSError as e:
                logger.warning("file_stat_failed", path=str(abs_path), error=str(e))
                continue
            if size > settings.max_file_size_bytes:
                logger.debug(
                    "file_skipped_too_large",
                    path=str(abs_path),
                    size=size,
                    max_size=settings.max_file_size_bytes,
                )
                continue

            discovered.append(
                DiscoveredFile(
                    relative_path=abs_path.relative_to(root).as_posix(),
                    absolute_path=str(abs_path),
                    size_bytes=size,
                )
            )

    # Sort by path for deterministic processing
    discovered.sort(key=lambda f: f.relative_path)

    logger.info(
        "files_discovered",
        root_path=str(root),
        file_count=len(discovered),
    )

    return discovered


def get_project_files_for_solution(solution_path: str) -> list[Path]:
    """
    List the C# project files referenced by a Visual Studio solution.

    Paths are resolved relative to the solution's directory.
    """
    if solution_path is None:
        raise ValueError("solution_path must not be None")

    solution_file = Path(solution_path)
    content = solution_file.read_text(encoding="utf-8-sig", errors="replace")
    projects = [
        (solution_file.parent / _normalize_separators(match.group("project_file"))).resolve()
        for match in _SOLUTION_PROJECT_PATTERN.finditer(content)
    ]

    logger.info(
        "solution_projects_found",
        solution=str(solution_file),
        project_count=len(projects),
    )
    return projects


def get_compile_files_for_project(project_path: str) -> list[Path]:
    """
    List the C# files compiled by an MSBuild project.

    Explicit <Compile Include="..."> items are honoured. SDK-style projects
    (root element with an Sdk attribute) also compile every *.cs file under
    the project directory outside bin/ and obj/, minus <Compile Remove="...">.
    """
    if project_path is None:
        raise ValueError("project_path must not be None")

    project_file = Path(project_path)
    project_dir = project_file.parent
    try:
        root = ET.parse(project_file).getroot()
    except ET.ParseError as e:
        raise ValueError(f"Invalid project file {project_path}: {e}") from e

    included: list[Path] = []
    removed: set[Path] = set()
    for element in root.iter():
        if _local_name(element.tag) != "Compile":
            continue
        if include := element.get("Include"):
            included.extend(_expand_item(project_dir, include))
        if remove := element.get("Remove"):
            removed.update(_expand_item(project_dir, remove))

    if root.get("Sdk"):
        included.extend(_default_compile_items(project_dir))

    seen: set[Path] = set()
    files: list[Path] = []
    for path in included:
        resolved = path.resolve()
        if resolved in seen or resolved in removed:
            continue
        if not resolved.name.lower().endswith(_CSHARP_EXTENSION):
            continue
        seen.add(resolved)
        files.append(resolved)

    logger.info(
        "project_compile_items_found",
        project=str(project_file),
        file_count=len(files),
    )
    return files


def read_file_content(file_path: str) -> tuple[str, str]:
    """
    Read file content and compute hash.

    Returns (content, hash).
    """
    with open(file_path, "rb") as f:
        raw_content = f.read()

    content_hash = compute_file_hash(raw_content)
    content = raw_content.decode("utf-8-sig", errors="replace")

    return content, content_hash


def _default_compile_items(project_dir: Path) -> list[Path]:
    items = []
    for dirpath, dirnames, filenames in os.walk(project_dir):
        dirnames[:] = sorted(d for d in dirnames if d.lower() not in {"bin", "obj"})
        for filename in sorted(filenames):
            if filename.lower().endswith(_CSHARP_EXTENSION):
                items.append(Path(dirpath) / filename)
    return items


def _expand_item(project_dir: Path, items: str) -> list[Path]:
    """Expand a ;-separated MSBuild item specification, including wildcards."""
    paths: list[Path] = []
    for part in items.split(";"):
        part = _normalize_separators(part.strip())
        if not part:
            continue
        if "*" in part or "?" in part:
            paths.extend(sorted(p.resolve() for p in project_dir.glob(part)))
        else:
            paths.append((project_dir / part).resolve())
    return paths


def _normalize_separators(path: str) -> str:
    return path.replace("\\", "/")


def _local_name(tag: str) -> str:
    # Old-style projects put every element in the MSBuild XML namespace
    return tag.rsplit("}", 1)[-1]
