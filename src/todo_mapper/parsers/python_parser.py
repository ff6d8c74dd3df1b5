"""Python language front-end using tree-sitter."""

import tree_sitter_python as ts_python

from todo_mapper.core import DeclarationKind, Language, Span, Trivia, TriviaKind
from todo_mapper.parsers.base import TreeSitterFrontEnd


class PythonFrontEnd(TreeSitterFrontEnd):
    """
    Front-end for Python source code.

    Classes are types and every function definition is a member, so a
    comment in a nested function resolves to the innermost function.
    """

    DECLARATION_KINDS = {
        "class_definition": DeclarationKind.MEMBER | DeclarationKind.TYPE,
        "function_definition": DeclarationKind.MEMBER,
    }
    DOC_LINE_PREFIX = None  # "#" comments have no documentation form

    def _grammar(self) -> object:
        return ts_python.language()

    @property
    def language(self) -> Language:
        return Language.PYTHON

    @property
    def file_extensions(self) -> frozenset[str]:
        return frozenset({".py"})

    def classify_comment(self, text: str, span: Span) -> Trivia:
        return Trivia(TriviaKind.SINGLE_LINE_COMMENT, text, span)
