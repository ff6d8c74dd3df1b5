"""
Conversion of tree-sitter trees into SyntaxTrees.

tree-sitter keeps comments as "extra" nodes among ordinary children. Here
they become trivia attached to a token of the comment's own syntactic
parent, so the parent of the anchor token is the comment's container:

- trailing trivia of the preceding sibling token, when that token ends on
  the line the comment starts on;
- otherwise leading trivia of the following sibling token;
- otherwise leading trivia of a zero-width "trivia_anchor" token inserted
  at the comment's position.

Runs of `///` lines on consecutive lines are first joined into a single
documentation comment.

Each comment stays next to its anchor in the token stream, so walking the
lowered tree visits comments in source order.
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from tree_sitter import Node, Tree

from todo_mapper.core import (
    DeclarationKind,
    Language,
    Span,
    SyntaxTree,
    SyntaxTreeBuilder,
    Trivia,
)

ANCHOR_NODE_TYPE = "trivia_anchor"
END_OF_FILE_NODE_TYPE = "end_of_file"
MISSING_NODE_TYPE = "MISSING"
ERROR_NODE_TYPE = "ERROR"

CommentClassifier = Callable[[str, Span], Trivia]


@dataclass(slots=True)
class _Frame:
    """Lowering state for the children of one parent node."""

    parent: int
    children: list[Node]
    is_root: bool = False
    position: int = 0
    previous_token: int | None = None  # set while the previous non-comment sibling is a token
    previous_token_end_line: int = -1
    pending_leading: list[Trivia] = field(default_factory=list)


class TreeLowering:
    """
    Lowers one tree-sitter tree into a SyntaxTree.

    Args:
        language: Language recorded on the resulting tree.
        declaration_kinds: Grammar node type -> DeclarationKind.
        comment_node_types: Grammar node types that are comments.
        classify_comment: Builds the Trivia for a comment's text and span.
        adopting_node_types: Node types that take ownership of the siblings
            following them (C# file-scoped namespaces).
        doc_line_prefix: Marker of single-line documentation comments
            (`///`); consecutive such lines are lowered as one comment.
    """

    def __init__(
        self,
        language: Language,
        declaration_kinds: dict[str, DeclarationKind],
        comment_node_types: frozenset[str],
        classify_comment: CommentClassifier,
        adopting_node_types: frozenset[str] = frozenset(),
        doc_line_prefix: str | None = None,
    ) -> None:
        self._language = language
        self._declaration_kinds = declaration_kinds
        self._comment_node_types = comment_node_types
        self._classify_comment = classify_comment
        self._adopting_node_types = adopting_node_types
        self._doc_line_prefix = doc_line_prefix

    def lower(self, tree: Tree, source_bytes: bytes) -> SyntaxTree:
        builder = SyntaxTreeBuilder(self._language)
        root = tree.root_node
        root_index = builder.add_node(
            root.type,
            parent=None,
            kind=self._declaration_kinds.get(root.type, DeclarationKind.NONE),
            span=_span_of(root),
        )

        stack = [_Frame(root_index, list(root.children), is_root=True)]
        while stack:
            frame = stack[-1]
            if frame.position >= len(frame.children):
                stack.pop()
                if frame.is_root:
                    self._add_end_of_file(builder, frame, root)
                continue

            child = frame.children[frame.position]
            frame.position += 1

            if child.type in self._comment_node_types:
                last = self._extend_doc_line_run(frame, child, source_bytes)
                self._attach_comment(builder, frame, child, last, source_bytes)
            elif child.child_count == 0:
                token = builder.add_token(
                    _node_text(child, source_bytes),
                    parent=frame.parent,
                    node_type=MISSING_NODE_TYPE if child.is_missing else child.type,
                    span=_span_of(child),
                    leading=frame.pending_leading,
                )
                frame.pending_leading = []
                frame.previous_token = token
                frame.previous_token_end_line = child.end_point[0]
            else:
                stack.append(self._enter_node(builder, frame, child, source_bytes))

        return builder.build()

    def _enter_node(
        self,
        builder: SyntaxTreeBuilder,
        frame: _Frame,
        node: Node,
        source_bytes: bytes,
    ) -> _Frame:
        index = builder.add_node(
            node.type,
            parent=frame.parent,
            kind=self._declaration_kinds.get(node.type, DeclarationKind.NONE),
            name=self._declared_name(node, source_bytes),
            span=_span_of(node),
        )
        frame.previous_token = None

        children = list(node.children)
        if node.type in self._adopting_node_types:
            # Remaining siblings belong to this node
            children.extend(frame.children[frame.position:])
            frame.position = len(frame.children)
        return _Frame(index, children)

    def _attach_comment(
        self,
        builder: SyntaxTreeBuilder,
        frame: _Frame,
        first: Node,
        last: Node,
        source_bytes: bytes,
    ) -> None:
        start_line, start_column = first.start_point
        end_line, end_column = last.end_point
        span = Span(start_line, start_column, end_line, end_column)
        text = source_bytes[first.start_byte:last.end_byte].decode("utf-8", errors="replace")
        trivia = self._classify_comment(text, span)

        if frame.previous_token is not None and frame.previous_token_end_line == span.start_line:
            builder.add_trailing_trivia(frame.previous_token, trivia)
            return

        following = self._next_non_comment(frame)
        if following is None and frame.is_root:
            # Picked up by the end-of-file token
            frame.pending_leading.append(trivia)
        elif following is not None and following.child_count == 0:
            frame.pending_leading.append(trivia)
        else:
            builder.add_token(
                "",
                parent=frame.parent,
                node_type=ANCHOR_NODE_TYPE,
                span=Span.empty_at(span.start_line, span.start_column),
                leading=[trivia],
            )

    def _extend_doc_line_run(self, frame: _Frame, first: Node, source_bytes: bytes) -> Node:
        """
        Consume the doc-comment lines directly following `first`.

        A block of `///` lines on consecutive lines is one documentation
        comment. Returns the last comment node of the block (`first` itself
        when it is not a doc line).
        """
        if not self._is_doc_line(first, source_bytes):
            return first
        last = first
        while frame.position < len(frame.children):
            candidate = frame.children[frame.position]
            if (
                candidate.type not in self._comment_node_types
                or candidate.start_point[0] != last.end_point[0] + 1
                or not self._is_doc_line(candidate, source_bytes)
            ):
                break
            last = candidate
            frame.position += 1
        return last

    def _is_doc_line(self, comment: Node, source_bytes: bytes) -> bool:
        prefix = self._doc_line_prefix
        if prefix is None:
            return False
        text = _node_text(comment, source_bytes)
        return text.startswith(prefix) and not text.startswith(prefix + "/")

    def _next_non_comment(self, frame: _Frame) -> Node | None:
        for sibling in frame.children[frame.position:]:
            if sibling.type not in self._comment_node_types:
                return sibling
        return None

    def _add_end_of_file(self, builder: SyntaxTreeBuilder, frame: _Frame, root: Node) -> None:
        line, column = root.end_point
        builder.add_token(
            "",
            parent=frame.parent,
            node_type=END_OF_FILE_NODE_TYPE,
            span=Span.empty_at(line, column),
            leading=frame.pending_leading,
        )
        frame.pending_leading = []

    def _declared_name(self, node: Node, source_bytes: bytes) -> str | None:
        if node.type not in self._declaration_kinds:
            return None
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return None
        return _node_text(name_node, source_bytes)


def _node_text(node: Node, source_bytes: bytes) -> str:
    """Extract text content from a tree-sitter node."""
    return source_bytes[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def _span_of(node: Node) -> Span:
    # tree-sitter points are (row, column), both 0-indexed
    start_line, start_column = node.start_point
    end_line, end_column = node.end_point
    return Span(start_line, start_column, end_line, end_column)
