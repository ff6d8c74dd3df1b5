"""Upward lookups of the declarations enclosing a token."""

from collections.abc import Callable

from todo_mapper.core import DeclarationKind, SyntaxNode, SyntaxTree

NodePredicate = Callable[[SyntaxNode], bool]


def find_enclosing(
    tree: SyntaxTree, anchor: SyntaxNode, predicate: NodePredicate
) -> SyntaxNode | None:
    """
    Find the nearest ancestor of `anchor` satisfying `predicate`.

    The climb starts at the anchor's parent and ends at the root (which is
    examined too). Returns None when no ancestor matches.
    """
    if tree is None:
        raise ValueError("tree must not be None")
    if anchor is None:
        raise ValueError("anchor must not be None")

    for ancestor in tree.ancestors(anchor):
        if predicate(ancestor):
            return ancestor
    return None


def is_member_declaration(node: SyntaxNode) -> bool:
    # Types and namespaces are members of their container too, but never
    # the enclosing member of a comment.
    return (
        DeclarationKind.MEMBER in node.kind
        and DeclarationKind.TYPE not in node.kind
        and DeclarationKind.NAMESPACE not in node.kind
    )


def is_type_declaration(node: SyntaxNode) -> bool:
    return DeclarationKind.TYPE in node.kind


def is_namespace_declaration(node: SyntaxNode) -> bool:
    return DeclarationKind.NAMESPACE in node.kind


def find_enclosing_member(tree: SyntaxTree, anchor: SyntaxNode) -> SyntaxNode | None:
    """Nearest enclosing method, property, constructor or similar member."""
    return find_enclosing(tree, anchor, is_member_declaration)


def find_enclosing_type(tree: SyntaxTree, anchor: SyntaxNode) -> SyntaxNode | None:
    """Nearest enclosing class, struct, interface, enum or record."""
    return find_enclosing(tree, anchor, is_type_declaration)


def find_enclosing_namespace(tree: SyntaxTree, anchor: SyntaxNode) -> SyntaxNode | None:
    return find_enclosing(tree, anchor, is_namespace_declaration)
