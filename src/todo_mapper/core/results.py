"""Per-file scan results."""

from dataclasses import dataclass

from todo_mapper.core.models import CommentContext, CommentRecord, Language
from todo_mapper.core.syntax import SyntaxNode, SyntaxTree

CONSTRUCTOR_NODE_TYPES = frozenset({
    "constructor_declaration",
    "compact_constructor_declaration",
})
CONSTRUCTOR_DISPLAY_NAME = ".ctor"
UNKNOWN_MEMBER_DISPLAY_NAME = "?"


@dataclass(frozen=True, slots=True)
class FileScan:
    """
    Result of scanning a single source file.

    Keeps the tree the comment records point into, so scope indices can
    be resolved for as long as the result is held.
    """

    relative_path: str
    language: Language | None
    content_hash: str
    tree: SyntaxTree | None
    comments: tuple[CommentRecord, ...]
    errors: tuple[str, ...] = ()

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    @property
    def comment_count(self) -> int:
        return len(self.comments)

    def describe(self, record: CommentRecord) -> CommentContext:
        """Resolve a record's scope indices to declaration names."""
        if self.tree is None:
            raise ValueError(f"No syntax tree for {self.relative_path}")
        return describe_comment(self.tree, record)


def describe_comment(tree: SyntaxTree, record: CommentRecord) -> CommentContext:
    member_name = None
    if record.enclosing_member is not None:
        member_name = member_display_name(tree[record.enclosing_member])
    return CommentContext(
        content=record.content,
        line=record.line,
        member_name=member_name,
        type_name=_name_at(tree, record.enclosing_type),
        namespace_name=_name_at(tree, record.enclosing_namespace),
    )


def member_display_name(node: SyntaxNode) -> str:
    if node.node_type in CONSTRUCTOR_NODE_TYPES:
        return CONSTRUCTOR_DISPLAY_NAME
    return node.name or UNKNOWN_MEMBER_DISPLAY_NAME


def _name_at(tree: SyntaxTree, index: int | None) -> str | None:
    if index is None:
        return None
    return tree[index].name
