"""Scanning orchestration service."""

import os
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from todo_mapper.config import get_settings
from todo_mapper.core import FileScan, Language, SyntaxTree
from todo_mapper.logging import get_logger
from todo_mapper.parsers import FrontEndRegistry, get_front_end_registry
from todo_mapper.parsers.lowering import ERROR_NODE_TYPE, MISSING_NODE_TYPE
from todo_mapper.scanner import CommentMatcher, TodoCommentIdentifier, matcher_from_settings
from todo_mapper.services.file_discovery import (
    DiscoveredFile,
    compute_file_hash,
    discover_files,
    get_compile_files_for_project,
    get_project_files_for_solution,
    read_file_content,
)

logger = get_logger(__name__)

_SOLUTION_SUFFIX = ".sln"
_PROJECT_SUFFIX = ".csproj"


class ScanningService:
    """
    Orchestrates TODO scans of sources, files, directories and solutions.

    Every file is scanned independently. Failures are recorded on that
    file's FileScan and the remaining files are still scanned.
    """

    def __init__(
        self,
        registry: FrontEndRegistry | None = None,
        matcher: CommentMatcher | None = None,
        max_workers: int | None = None,
    ) -> None:
        self._settings = get_settings()
        self._registry = registry or get_front_end_registry()
        self._identifier = TodoCommentIdentifier(
            matcher if matcher is not None else matcher_from_settings(self._settings)
        )
        self._max_workers = max_workers or self._settings.worker_count

    def scan_source(
        self,
        source_code: str,
        relative_path: str,
        language: Language | None = None,
        content_hash: str | None = None,
    ) -> FileScan:
        """
        Scan in-memory source text.

        The language is taken from the file extension unless given.
        Raises ValueError for unsupported languages.
        """
        if source_code is None:
            raise ValueError("source_code must not be None")

        language = language or self._registry.get_language_for_file(relative_path)
        if language is None:
            raise ValueError(f"Unsupported file type: {relative_path}")
        front_end = self._registry.get_front_end(language)
        if front_end is None:
            raise ValueError(f"Unsupported language: {language}")

        tree = front_end.parse(source_code)
        comments = self._identifier.get_comments(tree)

        return FileScan(
            relative_path=relative_path,
            language=language,
            content_hash=content_hash or compute_file_hash(source_code.encode("utf-8")),
            tree=tree,
            comments=tuple(comments),
            errors=_syntax_errors(tree),
        )

    def scan_file(self, file_path: str, relative_path: str | None = None) -> FileScan:
        """Read and scan one file; I/O and language errors end up on the result."""
        relative_path = relative_path or file_path
        try:
            content, content_hash = read_file_content(file_path)
            return self.scan_source(content, relative_path, content_hash=content_hash)
        except (OSError, ValueError) as e:
            logger.warning("file_scan_failed", path=relative_path, error=str(e))
            return FileScan(
                relative_path=relative_path,
                language=self._registry.get_language_for_file(relative_path),
                content_hash="",
                tree=None,
                comments=(),
                errors=(str(e),),
            )

    def scan_files(self, files: Sequence[DiscoveredFile]) -> list[FileScan]:
        """Scan files in parallel. Results are in the order of `files`."""
        if not files:
            return []

        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            results = list(
                executor.map(
                    lambda f: self.scan_file(f.absolute_path, f.relative_path),
                    files,
                )
            )

        logger.info(
            "scan_completed",
            file_count=len(results),
            comment_count=sum(r.comment_count for r in results),
            failed_files=sum(1 for r in results if r.tree is None),
        )
        return results

    def scan_directory(self, root_path: str) -> list[FileScan]:
        """Scan every supported file under a directory."""
        return self.scan_files(discover_files(root_path))

    def scan_project(self, project_path: str) -> list[FileScan]:
        """Scan the C# compile items of an MSBuild project."""
        base = Path(project_path).resolve().parent
        files = get_compile_files_for_project(project_path)
        return self.scan_files([_as_discovered(path, base) for path in files])

    def scan_solution(self, solution_path: str) -> list[FileScan]:
        """Scan the C# compile items of every project in a solution."""
        base = Path(solution_path).resolve().parent
        discovered: list[DiscoveredFile] = []
        seen: set[Path] = set()
        for project in get_project_files_for_solution(solution_path):
            try:
                compile_files = get_compile_files_for_project(str(project))
            except (OSError, ValueError) as e:
                logger.warning("project_load_failed", project=str(project), error=str(e))
                continue
            for path in compile_files:
                if path not in seen:
                    seen.add(path)
                    discovered.append(_as_discovered(path, base))
        return self.scan_files(discovered)

    def scan_paths(self, paths: Sequence[str]) -> list[FileScan]:
        """
        Scan a mix of files, directories, .sln solutions and .csproj projects.

        Results follow the order of `paths`; a path that is neither a
        directory nor a solution or project is scanned as a single file.
        """
        results: list[FileScan] = []
        for path in paths:
            target = Path(path)
            suffix = target.suffix.lower()
            if target.is_dir():
                results.extend(self.scan_directory(path))
            elif suffix == _SOLUTION_SUFFIX:
                results.extend(self.scan_solution(path))
            elif suffix == _PROJECT_SUFFIX:
                results.extend(self.scan_project(path))
            else:
                results.append(self.scan_file(path, relative_path=path))
        return results


def _as_discovered(path: Path, base: Path) -> DiscoveredFile:
    try:
        size = path.stat().st_size
    except OSError:
        size = 0
    return DiscoveredFile(
        relative_path=Path(os.path.relpath(path, base)).as_posix(),
        absolute_path=str(path),
        size_bytes=size,
    )


def _syntax_errors(tree: SyntaxTree) -> tuple[str, ...]:
    count = sum(1 for node in tree if node.node_type in (ERROR_NODE_TYPE, MISSING_NODE_TYPE))
    if count == 0:
        return ()
    return (f"source has {count} syntax error(s); scopes are best-effort",)
