"""Core domain models - pure Python dataclasses with no framework dependencies."""

from dataclasses import dataclass
from enum import Flag, StrEnum
from typing import Self


class Language(StrEnum):
    """Supported programming languages."""

    CSHARP = "csharp"
    JAVA = "java"
    PYTHON = "python"


class DeclarationKind(Flag):
    """
    Declaration role of a syntax node.

    Type and namespace declarations are members of their container as well,
    so they carry MEMBER together with TYPE or NAMESPACE.
    """

    NONE = 0
    MEMBER = 1
    TYPE = 2
    NAMESPACE = 4


class TriviaKind(StrEnum):
    """Kinds of non-semantic source text attached to tokens."""

    SINGLE_LINE_COMMENT = "single_line_comment"  # // ... or # ...
    MULTI_LINE_COMMENT = "multi_line_comment"  # /* ... */
    SINGLE_LINE_DOC_COMMENT = "single_line_doc_comment"  # /// ...
    MULTI_LINE_DOC_COMMENT = "multi_line_doc_comment"  # /** ... */
    DOC_COMMENT_EXTERIOR = "doc_comment_exterior"  # the ///, /** and */ markers
    DOC_COMMENT_TEXT = "doc_comment_text"
    WHITESPACE = "whitespace"
    END_OF_LINE = "end_of_line"
    OTHER = "other"

    @property
    def is_comment(self) -> bool:
        return self in COMMENT_TRIVIA_KINDS


COMMENT_TRIVIA_KINDS = frozenset({
    TriviaKind.SINGLE_LINE_COMMENT,
    TriviaKind.MULTI_LINE_COMMENT,
    TriviaKind.DOC_COMMENT_EXTERIOR,
    TriviaKind.SINGLE_LINE_DOC_COMMENT,
    TriviaKind.MULTI_LINE_DOC_COMMENT,
})


@dataclass(frozen=True, slots=True)
class Span:
    """Source range. Lines and columns are 0-indexed (tree-sitter convention)."""

    start_line: int
    start_column: int
    end_line: int
    end_column: int

    def __post_init__(self) -> None:
        if self.start_line < 0 or self.end_line < 0:
            raise ValueError("line numbers must be >= 0")
        if (self.end_line, self.end_column) < (self.start_line, self.start_column):
            raise ValueError("span end must not precede span start")

    @classmethod
    def empty_at(cls, line: int, column: int) -> Self:
        return cls(line, column, line, column)


@dataclass(frozen=True, slots=True)
class Trivia:
    """
    A span of non-semantic text attached to a token.

    Structured trivia (documentation comments) carries nested trivia in
    `children`.
    """

    kind: TriviaKind
    text: str
    span: Span
    children: tuple["Trivia", ...] = ()

    @property
    def is_comment(self) -> bool:
        return self.kind.is_comment

    @property
    def is_structured(self) -> bool:
        return len(self.children) > 0


@dataclass(frozen=True, slots=True)
class CommentRecord:
    """
    A matched comment and its enclosing declaration scopes.

    The scope fields are indices into the SyntaxTree the record was
    produced from; the tree must stay alive for them to be resolved.
    """

    content: str
    line: int  # 0-indexed start line of the comment
    enclosing_member: int | None = None
    enclosing_type: int | None = None
    enclosing_namespace: int | None = None

    def __post_init__(self) -> None:
        if self.line < 0:
            raise ValueError("line must be >= 0")


@dataclass(frozen=True, slots=True)
class CommentContext:
    """Names of the scopes around a comment, resolved for presentation."""

    content: str
    line: int
    member_name: str | None = None
    type_name: str | None = None
    namespace_name: str | None = None
