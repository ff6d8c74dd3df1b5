"""Language front-ends using tree-sitter for syntax trees."""

from todo_mapper.parsers.base import LanguageFrontEnd, TreeSitterFrontEnd
from todo_mapper.parsers.registry import FrontEndRegistry, get_front_end_registry

__all__ = [
    "FrontEndRegistry",
    "LanguageFrontEnd",
    "TreeSitterFrontEnd",
    "get_front_end_registry",
]
