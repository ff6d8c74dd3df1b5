"""
Index-addressed syntax tree.

Nodes live in a flat arena and refer to each other by integer index:
children downward, a single parent index upward. Upward scope lookups
are index-chasing loops that stop at the root, whose parent is None.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from todo_mapper.core.models import DeclarationKind, Language, Span, Trivia


@dataclass(frozen=True, slots=True)
class SyntaxNode:
    """
    A node or token of a SyntaxTree.

    Tokens are the leaves: they carry their source text and the trivia
    attached before (leading) and after (trailing) them.
    """

    index: int
    node_type: str  # grammar node type, e.g. "method_declaration"
    kind: DeclarationKind
    parent: int | None
    children: tuple[int, ...]
    span: Span
    name: str | None = None  # declared identifier, for declarations
    text: str | None = None  # source text, tokens only
    leading_trivia: tuple[Trivia, ...] = ()
    trailing_trivia: tuple[Trivia, ...] = ()

    @property
    def is_token(self) -> bool:
        return self.text is not None


class SyntaxTree:
    """Immutable arena of SyntaxNodes. Index 0 is the root."""

    def __init__(
        self,
        nodes: Sequence[SyntaxNode],
        language: Language | None = None,
    ) -> None:
        if not nodes:
            raise ValueError("SyntaxTree requires at least a root node")
        for position, node in enumerate(nodes):
            if node.index != position:
                raise ValueError(f"node at position {position} has index {node.index}")
            if position == 0:
                if node.parent is not None:
                    raise ValueError("root node must not have a parent")
            # Parents precede their children, so the parent chain cannot cycle
            elif node.parent is None or not 0 <= node.parent < position:
                raise ValueError(f"node {position} has invalid parent {node.parent}")
        self._nodes = tuple(nodes)
        self.language = language

    @property
    def root(self) -> SyntaxNode:
        return self._nodes[0]

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, index: int) -> SyntaxNode:
        return self._nodes[index]

    def __iter__(self) -> Iterator[SyntaxNode]:
        return iter(self._nodes)

    def parent(self, node: SyntaxNode) -> SyntaxNode | None:
        """Get the parent of a node, or None for the root."""
        if node.parent is None:
            return None
        return self._nodes[node.parent]

    def children(self, node: SyntaxNode) -> Iterator[SyntaxNode]:
        """Iterate the direct children of a node in source order."""
        for index in node.children:
            yield self._nodes[index]

    def ancestors(self, node: SyntaxNode) -> Iterator[SyntaxNode]:
        """Iterate from the node's parent up to and including the root."""
        current = node.parent
        while current is not None:
            ancestor = self._nodes[current]
            yield ancestor
            current = ancestor.parent

    def tokens(self) -> Iterator[SyntaxNode]:
        """Iterate tokens in source order."""
        stack = [self.root.index]
        while stack:
            node = self._nodes[stack.pop()]
            if node.is_token:
                yield node
            stack.extend(reversed(node.children))


@dataclass(slots=True)
class _PendingNode:
    node_type: str
    kind: DeclarationKind
    parent: int | None
    span: Span
    name: str | None = None
    text: str | None = None
    children: list[int] = field(default_factory=list)
    leading_trivia: list[Trivia] = field(default_factory=list)
    trailing_trivia: list[Trivia] = field(default_factory=list)


class SyntaxTreeBuilder:
    """
    Mutable accumulator used by front-ends (and tests) to assemble a tree.

    Children are ordered by the order in which they are added.
    """

    def __init__(self, language: Language | None = None) -> None:
        self._language = language
        self._pending: list[_PendingNode] = []

    def add_node(
        self,
        node_type: str,
        parent: int | None,
        kind: DeclarationKind = DeclarationKind.NONE,
        name: str | None = None,
        span: Span | None = None,
    ) -> int:
        """Add an interior node and return its index."""
        return self._add(_PendingNode(
            node_type=node_type,
            kind=kind,
            parent=parent,
            span=span or Span.empty_at(0, 0),
            name=name,
        ))

    def add_token(
        self,
        text: str,
        parent: int,
        node_type: str | None = None,
        span: Span | None = None,
        leading: Sequence[Trivia] = (),
        trailing: Sequence[Trivia] = (),
    ) -> int:
        """Add a token (leaf) and return its index."""
        index = self._add(_PendingNode(
            node_type=node_type or text,
            kind=DeclarationKind.NONE,
            parent=parent,
            span=span or Span.empty_at(0, 0),
            text=text,
        ))
        self._pending[index].leading_trivia.extend(leading)
        self._pending[index].trailing_trivia.extend(trailing)
        return index

    def add_trailing_trivia(self, token: int, trivia: Trivia) -> None:
        self._token(token).trailing_trivia.append(trivia)

    def build(self) -> SyntaxTree:
        """Freeze the accumulated nodes into a SyntaxTree."""
        if not self._pending:
            raise ValueError("cannot build an empty tree")
        nodes = [
            SyntaxNode(
                index=index,
                node_type=pending.node_type,
                kind=pending.kind,
                parent=pending.parent,
                children=tuple(pending.children),
                span=pending.span,
                name=pending.name,
                text=pending.text,
                leading_trivia=tuple(pending.leading_trivia),
                trailing_trivia=tuple(pending.trailing_trivia),
            )
            for index, pending in enumerate(self._pending)
        ]
        return SyntaxTree(nodes, language=self._language)

    def _add(self, pending: _PendingNode) -> int:
        if pending.parent is None:
            if self._pending:
                raise ValueError("tree already has a root")
        elif not 0 <= pending.parent < len(self._pending):
            raise ValueError(f"unknown parent index {pending.parent}")
        elif self._pending[pending.parent].text is not None:
            raise ValueError("tokens cannot have children")
        index = len(self._pending)
        self._pending.append(pending)
        if pending.parent is not None:
            self._pending[pending.parent].children.append(index)
        return index

    def _token(self, index: int) -> _PendingNode:
        pending = self._pending[index]
        if pending.text is None:
            raise ValueError(f"node {index} is not a token")
        return pending
