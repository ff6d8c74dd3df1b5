"""C# language front-end using tree-sitter."""

import tree_sitter_c_sharp as ts_csharp

from todo_mapper.core import DeclarationKind, Language
from todo_mapper.parsers.base import TreeSitterFrontEnd

_MEMBER = DeclarationKind.MEMBER
_TYPE = DeclarationKind.MEMBER | DeclarationKind.TYPE
_NAMESPACE = DeclarationKind.MEMBER | DeclarationKind.NAMESPACE


class CSharpFrontEnd(TreeSitterFrontEnd):
    """
    Front-end for C# source code.

    Namespaces (block and file-scoped), type declarations and members are
    classified; `//`, `/* */`, `///` and `/** */` comments become trivia.
    """

    DECLARATION_KINDS = {
        # Namespaces
        "namespace_declaration": _NAMESPACE,
        "file_scoped_namespace_declaration": _NAMESPACE,
        # Types
        "class_declaration": _TYPE,
        "struct_declaration": _TYPE,
        "interface_declaration": _TYPE,
        "enum_declaration": _TYPE,
        "record_declaration": _TYPE,
        "record_struct_declaration": _TYPE,
        # Members
        "method_declaration": _MEMBER,
        "constructor_declaration": _MEMBER,
        "destructor_declaration": _MEMBER,
        "property_declaration": _MEMBER,
        "indexer_declaration": _MEMBER,
        "operator_declaration": _MEMBER,
        "conversion_operator_declaration": _MEMBER,
        "event_declaration": _MEMBER,
        "event_field_declaration": _MEMBER,
        "field_declaration": _MEMBER,
        "delegate_declaration": _MEMBER,
        "enum_member_declaration": _MEMBER,
    }
    ADOPTING_NODE_TYPES = frozenset({"file_scoped_namespace_declaration"})

    def _grammar(self) -> object:
        return ts_csharp.language()

    @property
    def language(self) -> Language:
        return Language.CSHARP

    @property
    def file_extensions(self) -> frozenset[str]:
        return frozenset({".cs"})
