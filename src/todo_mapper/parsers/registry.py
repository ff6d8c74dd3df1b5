"""Front-end registry for managing language-specific front-ends."""

from functools import lru_cache

from todo_mapper.core import Language
from todo_mapper.logging import get_logger
from todo_mapper.parsers.base import LanguageFrontEnd
from todo_mapper.parsers.csharp_parser import CSharpFrontEnd
from todo_mapper.parsers.java_parser import JavaFrontEnd
from todo_mapper.parsers.python_parser import PythonFrontEnd

logger = get_logger(__name__)


class FrontEndRegistry:
    """
    Registry of language-specific front-ends.

    Provides lookups of the appropriate front-end by language or by
    file extension.
    """

    def __init__(self) -> None:
        self._front_ends: dict[Language, LanguageFrontEnd] = {}
        self._extension_map: dict[str, Language] = {}

    def register(self, front_end: LanguageFrontEnd) -> None:
        """Register a front-end for its language."""
        self._front_ends[front_end.language] = front_end
        for ext in front_end.file_extensions:
            self._extension_map[ext] = front_end.language
        logger.debug(
            "front_end_registered",
            language=front_end.language.value,
            extensions=sorted(front_end.file_extensions),
        )

    def get_front_end(self, language: Language) -> LanguageFrontEnd | None:
        """Get front-end for a specific language."""
        return self._front_ends.get(language)

    def get_front_end_for_file(self, file_path: str) -> LanguageFrontEnd | None:
        """Get front-end based on file extension."""
        language = self.get_language_for_file(file_path)
        if language:
            return self._front_ends.get(language)
        return None

    def get_language_for_file(self, file_path: str) -> Language | None:
        """Get language based on file extension."""
        return self._extension_map.get(self._get_extension(file_path))

    def is_supported(self, file_path: str) -> bool:
        """Check if a file can be scanned."""
        return self.get_front_end_for_file(file_path) is not None

    @property
    def supported_languages(self) -> list[Language]:
        """List of all supported languages."""
        return list(self._front_ends.keys())

    @property
    def supported_extensions(self) -> list[str]:
        """List of all supported file extensions."""
        return list(self._extension_map.keys())

    def _get_extension(self, file_path: str) -> str:
        """Extract the lower-cased file extension from a path."""
        name = file_path.replace("\\", "/").rsplit("/", 1)[-1]
        parts = name.split(".")
        if len(parts) >= 2:
            return f".{parts[-1].lower()}"
        return ""


def _create_default_registry() -> FrontEndRegistry:
    """Create and configure the default front-end registry."""
    registry = FrontEndRegistry()

    registry.register(CSharpFrontEnd())
    registry.register(JavaFrontEnd())
    registry.register(PythonFrontEnd())

    logger.info(
        "front_end_registry_initialized",
        languages=[lang.value for lang in registry.supported_languages],
    )

    return registry


@lru_cache
def get_front_end_registry() -> FrontEndRegistry:
    """Get the singleton front-end registry instance."""
    return _create_default_registry()
