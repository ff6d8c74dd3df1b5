"""Core domain layer - pure Python business logic."""

from todo_mapper.core.models import (
    COMMENT_TRIVIA_KINDS,
    CommentContext,
    CommentRecord,
    DeclarationKind,
    Language,
    Span,
    Trivia,
    TriviaKind,
)
from todo_mapper.core.results import FileScan, describe_comment, member_display_name
from todo_mapper.core.syntax import SyntaxNode, SyntaxTree, SyntaxTreeBuilder

__all__ = [
    "COMMENT_TRIVIA_KINDS",
    "CommentContext",
    "CommentRecord",
    "DeclarationKind",
    "FileScan",
    "Language",
    "Span",
    "SyntaxNode",
    "SyntaxTree",
    "SyntaxTreeBuilder",
    "Trivia",
    "TriviaKind",
    "describe_comment",
    "member_display_name",
]
