"""Java language front-end using tree-sitter."""

import tree_sitter_java as ts_java

from todo_mapper.core import DeclarationKind, Language
from todo_mapper.parsers.base import TreeSitterFrontEnd

_MEMBER = DeclarationKind.MEMBER
_TYPE = DeclarationKind.MEMBER | DeclarationKind.TYPE


class JavaFrontEnd(TreeSitterFrontEnd):
    """
    Front-end for Java source code.

    A package declaration does not enclose the types after it, so Java
    comments never have a namespace scope.
    """

    DECLARATION_KINDS = {
        # Types
        "class_declaration": _TYPE,
        "interface_declaration": _TYPE,
        "enum_declaration": _TYPE,
        "record_declaration": _TYPE,
        "annotation_type_declaration": _TYPE,
        # Members
        "method_declaration": _MEMBER,
        "constructor_declaration": _MEMBER,
        "compact_constructor_declaration": _MEMBER,
        "field_declaration": _MEMBER,
        "constant_declaration": _MEMBER,
        "annotation_type_element_declaration": _MEMBER,
    }
    # Older grammars emit a single "comment" type
    COMMENT_NODE_TYPES = frozenset({"line_comment", "block_comment", "comment"})

    def _grammar(self) -> object:
        return ts_java.language()

    @property
    def language(self) -> Language:
        return Language.JAVA

    @property
    def file_extensions(self) -> frozenset[str]:
        return frozenset({".java"})
