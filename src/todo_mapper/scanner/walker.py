"""Pre-order traversal of a SyntaxTree including its trivia."""

from collections.abc import Callable, Iterator

from todo_mapper.core import SyntaxNode, SyntaxTree, Trivia


def traverse(
    tree: SyntaxTree,
    descend_into_structured_trivia: bool = True,
) -> Iterator[tuple[SyntaxNode, Trivia | None]]:
    """
    Walk the tree in source order.

    Yields (node, None) for every node and token, and (token, trivia) for
    every trivia item. A token's leading trivia comes before the token,
    its trailing trivia after it. Children of structured trivia follow
    their parent trivia.
    """
    if tree is None:
        raise ValueError("tree must not be None")
    return _traverse(tree, descend_into_structured_trivia)


def _traverse(tree: SyntaxTree, descend: bool) -> Iterator[tuple[SyntaxNode, Trivia | None]]:
    # Explicit stack: generated trees can nest deeper than the recursion limit
    stack = [tree.root.index]
    while stack:
        node = tree[stack.pop()]
        if node.is_token:
            for trivia in node.leading_trivia:
                yield from _traverse_trivia(node, trivia, descend)
            yield node, None
            for trivia in node.trailing_trivia:
                yield from _traverse_trivia(node, trivia, descend)
        else:
            yield node, None
        stack.extend(reversed(node.children))


def _traverse_trivia(
    token: SyntaxNode, trivia: Trivia, descend: bool
) -> Iterator[tuple[SyntaxNode, Trivia]]:
    yield token, trivia
    if descend:
        for child in trivia.children:
            yield from _traverse_trivia(token, child, descend)


def iter_comment_trivia(tree: SyntaxTree) -> Iterator[tuple[Trivia, SyntaxNode]]:
    """Lazily yield (comment trivia, anchor token) pairs in source order."""
    events = traverse(tree)
    return (
        (trivia, node)
        for node, trivia in events
        if trivia is not None and trivia.is_comment
    )


class SyntaxWalker:
    """
    Visitor over a SyntaxTree.

    Subclasses override the visit hooks they care about; the default
    hooks do nothing.
    """

    def __init__(self, descend_into_structured_trivia: bool = True) -> None:
        self._descend_into_structured_trivia = descend_into_structured_trivia

    def walk(self, tree: SyntaxTree) -> None:
        for node, trivia in traverse(tree, self._descend_into_structured_trivia):
            if trivia is not None:
                self.visit_trivia(trivia, node)
            elif node.is_token:
                self.visit_token(node)
            else:
                self.visit_node(node)

    def visit_node(self, node: SyntaxNode) -> None:
        pass

    def visit_token(self, token: SyntaxNode) -> None:
        pass

    def visit_trivia(self, trivia: Trivia, token: SyntaxNode) -> None:
        pass


class CommentLocatingWalker(SyntaxWalker):
    """Reports every comment-kind trivia, with its anchor token, to a callback."""

    def __init__(self, comment_located: Callable[[Trivia, SyntaxNode], None]) -> None:
        if comment_located is None:
            raise ValueError("comment_located must not be None")
        super().__init__(descend_into_structured_trivia=True)
        self._comment_located = comment_located

    def visit_trivia(self, trivia: Trivia, token: SyntaxNode) -> None:
        if trivia.is_comment:
            self._comment_located(trivia, token)
