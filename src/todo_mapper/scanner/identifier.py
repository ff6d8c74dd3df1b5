"""Find TODO comments in a syntax tree and tag each with its enclosing scopes."""

from collections.abc import Iterator

from todo_mapper.core import CommentRecord, Language, SyntaxNode, SyntaxTree, Trivia
from todo_mapper.logging import get_logger
from todo_mapper.parsers.registry import FrontEndRegistry, get_front_end_registry
from todo_mapper.scanner.matcher import DEFAULT_TODO_MATCHER, CommentMatcher
from todo_mapper.scanner.scope import (
    find_enclosing_member,
    find_enclosing_namespace,
    find_enclosing_type,
)
from todo_mapper.scanner.walker import CommentLocatingWalker, iter_comment_trivia

logger = get_logger(__name__)


class TodoCommentIdentifier:
    """
    Scans syntax trees for comments accepted by a matcher.

    Each match becomes a CommentRecord carrying the comment text, its
    0-indexed line and the indices of the enclosing member, type and
    namespace declarations (None where there is no such scope).
    """

    def __init__(self, matcher: CommentMatcher = DEFAULT_TODO_MATCHER) -> None:
        if matcher is None or not callable(matcher):
            raise ValueError("matcher must be a callable taking the comment text")
        self._matcher = matcher

    def iter_comments(self, tree: SyntaxTree) -> Iterator[CommentRecord]:
        """Lazily yield matching comments in source order."""
        comments = iter_comment_trivia(tree)
        return (
            self._build_record(tree, trivia, token)
            for trivia, token in comments
            if self._matcher(trivia.text)
        )

    def get_comments(self, tree: SyntaxTree) -> list[CommentRecord]:
        """Collect all matching comments in source order."""
        records: list[CommentRecord] = []

        def comment_located(trivia: Trivia, token: SyntaxNode) -> None:
            if self._matcher(trivia.text):
                records.append(self._build_record(tree, trivia, token))

        CommentLocatingWalker(comment_located).walk(tree)
        logger.debug(
            "tree_scanned",
            language=tree.language.value if tree.language else None,
            node_count=len(tree),
            comment_count=len(records),
        )
        return records

    def get_todo_comments(
        self,
        source_code: str,
        language: Language,
        registry: FrontEndRegistry | None = None,
    ) -> tuple[SyntaxTree, list[CommentRecord]]:
        """
        Parse source text and scan it.

        Returns the tree alongside the records, since the records' scope
        indices are only meaningful together with it.
        """
        if source_code is None:
            raise ValueError("source_code must not be None")

        registry = registry or get_front_end_registry()
        front_end = registry.get_front_end(language)
        if front_end is None:
            raise ValueError(f"Unsupported language: {language}")

        tree = front_end.parse(source_code)
        return tree, self.get_comments(tree)

    def _build_record(
        self, tree: SyntaxTree, trivia: Trivia, token: SyntaxNode
    ) -> CommentRecord:
        member = find_enclosing_member(tree, token)
        type_decl = find_enclosing_type(tree, token)
        namespace = find_enclosing_namespace(tree, token)
        return CommentRecord(
            content=trivia.text,
            line=trivia.span.start_line,
            enclosing_member=member.index if member else None,
            enclosing_type=type_decl.index if type_decl else None,
            enclosing_namespace=namespace.index if namespace else None,
        )
