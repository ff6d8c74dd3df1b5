"""Base front-end abstraction for language-specific implementations."""

from abc import ABC, abstractmethod

from tree_sitter import Language as TreeSitterLanguage
from tree_sitter import Parser

from todo_mapper.core import DeclarationKind, Language, Span, SyntaxTree, Trivia, TriviaKind
from todo_mapper.parsers.lowering import TreeLowering


class LanguageFrontEnd(ABC):
    """
    Abstract base class for language front-ends.

    A front-end turns source text into a SyntaxTree: declarations tagged
    with their DeclarationKind, comments attached to tokens as trivia.
    """

    @property
    @abstractmethod
    def language(self) -> Language:
        """The programming language this front-end handles."""
        ...

    @property
    @abstractmethod
    def file_extensions(self) -> frozenset[str]:
        """File extensions this front-end can handle (e.g., {'.cs'})."""
        ...

    @abstractmethod
    def parse(self, source_code: str) -> SyntaxTree:
        """
        Parse source code into a SyntaxTree.

        Syntactically invalid source still yields a best-effort tree.
        """
        ...


class TreeSitterFrontEnd(LanguageFrontEnd):
    """
    Front-end backed by a tree-sitter grammar.

    Subclasses provide the grammar and the node-type tables; the
    conversion itself is shared.
    """

    DECLARATION_KINDS: dict[str, DeclarationKind] = {}
    COMMENT_NODE_TYPES: frozenset[str] = frozenset({"comment"})
    ADOPTING_NODE_TYPES: frozenset[str] = frozenset()
    DOC_LINE_PREFIX: str | None = "///"

    def __init__(self) -> None:
        self._ts_language = TreeSitterLanguage(self._grammar())
        self._lowering = TreeLowering(
            language=self.language,
            declaration_kinds=self.DECLARATION_KINDS,
            comment_node_types=self.COMMENT_NODE_TYPES,
            classify_comment=self.classify_comment,
            adopting_node_types=self.ADOPTING_NODE_TYPES,
            doc_line_prefix=self.DOC_LINE_PREFIX,
        )

    @abstractmethod
    def _grammar(self) -> object:
        """The tree-sitter language pointer, e.g. tree_sitter_java.language()."""
        ...

    def parse(self, source_code: str) -> SyntaxTree:
        if source_code is None:
            raise ValueError("source_code must not be None")
        source_bytes = source_code.encode("utf-8")
        # Parsers are not thread-safe; the service scans files concurrently
        tree = Parser(self._ts_language).parse(source_bytes)
        return self._lowering.lower(tree, source_bytes)

    def classify_comment(self, text: str, span: Span) -> Trivia:
        """
        Build the trivia for a C-family comment.

        `///` and `/** */` documentation comments become structured trivia
        with their delimiters as exterior children.
        """
        if text.startswith("///") and not text.startswith("////"):
            return _single_line_doc_comment(text, span)
        if text.startswith("/**") and not text.startswith("/**/"):
            return _multi_line_doc_comment(text, span)
        if text.startswith("/*"):
            return Trivia(TriviaKind.MULTI_LINE_COMMENT, text, span)
        return Trivia(TriviaKind.SINGLE_LINE_COMMENT, text, span)


def _single_line_doc_comment(text: str, span: Span) -> Trivia:
    """
    Structured trivia for a block of one or more `///` lines.

    Every line contributes a `///` exterior and, when non-empty, the text
    after it. Lines after the first start at column 0 of `text`.
    """
    children: list[Trivia] = []
    for offset, line_text in enumerate(text.split("\n")):
        line = span.start_line + offset
        line_text = line_text.rstrip("\r")
        marker = line_text.find("///")
        if marker < 0:
            continue
        column = (span.start_column if offset == 0 else 0) + marker
        children.append(
            Trivia(TriviaKind.DOC_COMMENT_EXTERIOR, "///", Span(line, column, line, column + 3))
        )
        body = line_text[marker + 3:]
        if body:
            children.append(
                Trivia(
                    TriviaKind.DOC_COMMENT_TEXT,
                    body,
                    Span(line, column + 3, line, column + 3 + len(body)),
                )
            )
    return Trivia(TriviaKind.SINGLE_LINE_DOC_COMMENT, text, span, tuple(children))


def _multi_line_doc_comment(text: str, span: Span) -> Trivia:
    line, column = span.start_line, span.start_column
    children = [
        Trivia(TriviaKind.DOC_COMMENT_EXTERIOR, "/**", Span(line, column, line, column + 3)),
    ]
    closed = text.endswith("*/") and len(text) >= 5
    body = text[3:-2] if closed else text[3:]
    body_end = (
        Span.empty_at(span.end_line, span.end_column - 2)
        if closed
        else Span.empty_at(span.end_line, span.end_column)
    )
    if body:
        children.append(
            Trivia(
                TriviaKind.DOC_COMMENT_TEXT,
                body,
                Span(line, column + 3, body_end.start_line, body_end.start_column),
            )
        )
    if closed:
        children.append(
            Trivia(
                TriviaKind.DOC_COMMENT_EXTERIOR,
                "*/",
                Span(span.end_line, span.end_column - 2, span.end_line, span.end_column),
            )
        )
    return Trivia(TriviaKind.MULTI_LINE_DOC_COMMENT, text, span, tuple(children))
