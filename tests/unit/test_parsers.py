"""Tests for language front-ends."""

import pytest

from todo_mapper.core import DeclarationKind, Language, SyntaxTree, TriviaKind
from todo_mapper.parsers import get_front_end_registry
from todo_mapper.parsers.csharp_parser import CSharpFrontEnd
from todo_mapper.parsers.java_parser import JavaFrontEnd
from todo_mapper.parsers.python_parser import PythonFrontEnd
from todo_mapper.scanner import TodoCommentIdentifier, iter_comment_trivia


def _context(tree: SyntaxTree, line: int) -> tuple[str | None, str | None, str | None]:
    """(member, type, namespace) names for the TODO comment starting on `line`."""
    for record in TodoCommentIdentifier().get_comments(tree):
        if record.line == line:
            return tuple(
                tree[index].name if index is not None else None
                for index in (record.enclosing_member, record.enclosing_type, record.enclosing_namespace)
            )
    raise AssertionError(f"no TODO comment on line {line}")


class TestCSharpFrontEnd:
    """Tests for the C# front-end."""

    @pytest.fixture(scope="class")
    def front_end(self) -> CSharpFrontEnd:
        return CSharpFrontEnd()

    @pytest.fixture
    def tree(self, front_end: CSharpFrontEnd, sample_csharp_code: str) -> SyntaxTree:
        return front_end.parse(sample_csharp_code)

    def test_language(self, front_end: CSharpFrontEnd):
        assert front_end.language == Language.CSHARP

    def test_file_extensions(self, front_end: CSharpFrontEnd):
        assert ".cs" in front_end.file_extensions

    def test_declaration_kinds(self, tree: SyntaxTree):
        kinds = {(node.node_type, node.name): node.kind for node in tree if node.name}

        assert kinds[("namespace_declaration", "Sample.Services")] == (
            DeclarationKind.MEMBER | DeclarationKind.NAMESPACE
        )
        assert kinds[("class_declaration", "DataService")] == DeclarationKind.MEMBER | DeclarationKind.TYPE
        assert kinds[("constructor_declaration", "DataService")] == DeclarationKind.MEMBER
        assert kinds[("method_declaration", "Process")] == DeclarationKind.MEMBER

    def test_parent_links(self, tree: SyntaxTree):
        for node in tree:
            for child in tree.children(node):
                assert child.parent == node.index

    def test_file_header_has_no_scope(self, tree: SyntaxTree):
        assert _context(tree, 0) == (None, None, None)

    def test_comment_in_constructor(self, tree: SyntaxTree):
        member, type_name, namespace = _context(tree, 12)

        assert type_name == "DataService"
        assert namespace == "Sample.Services"
        records = TodoCommentIdentifier().get_comments(tree)
        ctor = tree[next(r for r in records if r.line == 12).enclosing_member]
        assert ctor.node_type == "constructor_declaration"

    def test_trailing_field_comment_has_type_but_no_member(self, tree: SyntaxTree):
        assert _context(tree, 8) == (None, "DataService", "Sample.Services")

    def test_comment_between_members(self, tree: SyntaxTree):
        assert _context(tree, 16) == (None, "DataService", "Sample.Services")

    def test_comment_after_accessor_belongs_to_property(self, tree: SyntaxTree):
        assert _context(tree, 20) == ("Count", "DataService", "Sample.Services")

    def test_comment_in_method(self, tree: SyntaxTree):
        assert _context(tree, 25) == ("Process", "DataService", "Sample.Services")

    def test_nested_type_is_innermost(self, tree: SyntaxTree):
        assert _context(tree, 33) == ("Inner", "Nested", "Sample.Services")

    def test_doc_comment_is_structured(self, tree: SyntaxTree):
        docs = [
            trivia for trivia, _ in iter_comment_trivia(tree)
            if trivia.kind == TriviaKind.SINGLE_LINE_DOC_COMMENT
        ]

        assert len(docs) == 1
        assert docs[0].is_structured
        assert docs[0].text == "/// <summary>TODO: document</summary>"
        assert docs[0].children[0].kind == TriviaKind.DOC_COMMENT_EXTERIOR
        assert docs[0].children[0].text == "///"

    def test_doc_comment_exterior_reported_but_not_matched(self, tree: SyntaxTree):
        everything = TodoCommentIdentifier(lambda text: True).get_comments(tree)
        exteriors = [r for r in everything if r.content == "///"]

        assert len(exteriors) == 1
        assert exteriors[0].line == 5
        assert "///" not in [r.content for r in TodoCommentIdentifier().get_comments(tree)]

    def test_consecutive_doc_lines_are_one_comment(self, front_end: CSharpFrontEnd):
        source = (
            "class A\n"
            "{\n"
            "    /// <summary>\n"
            "    /// TODO: x\n"
            "    /// </summary>\n"
            "    void M() { }\n"
            "}\n"
        )

        records = TodoCommentIdentifier().get_comments(front_end.parse(source))

        assert len(records) == 1
        assert records[0].line == 2
        assert records[0].content == "/// <summary>\n    /// TODO: x\n    /// </summary>"

    def test_doc_block_children_per_line(self, front_end: CSharpFrontEnd):
        tree = front_end.parse("class A\n{\n    /// one\n    /// two\n    void M() { }\n}\n")

        (doc, _), = [
            pair for pair in iter_comment_trivia(tree)
            if pair[0].kind == TriviaKind.SINGLE_LINE_DOC_COMMENT
        ]
        exteriors = [c for c in doc.children if c.kind == TriviaKind.DOC_COMMENT_EXTERIOR]
        texts = [c.text for c in doc.children if c.kind == TriviaKind.DOC_COMMENT_TEXT]

        assert [(c.span.start_line, c.span.start_column) for c in exteriors] == [(2, 4), (3, 4)]
        assert texts == [" one", " two"]
        assert (doc.span.start_line, doc.span.end_line) == (2, 3)

    def test_doc_runs_split_by_blank_lines_and_plain_comments(self, front_end: CSharpFrontEnd):
        source = (
            "class A\n"
            "{\n"
            "    /// TODO: first\n"
            "\n"
            "    /// TODO: second\n"
            "    //// TODO: not documentation\n"
            "    void M() { }\n"
            "}\n"
        )

        records = TodoCommentIdentifier().get_comments(front_end.parse(source))

        assert [(r.line, r.content) for r in records] == [
            (2, "/// TODO: first"),
            (4, "/// TODO: second"),
            (5, "//// TODO: not documentation"),
        ]

    def test_trailing_comment_on_same_line_token(self, front_end: CSharpFrontEnd):
        tree = front_end.parse("class A\n{\n    void M()\n    { // TODO: here\n    }\n}\n")

        (trivia, token), = list(iter_comment_trivia(tree))
        assert token.text == "{"
        assert trivia in token.trailing_trivia

    def test_file_scoped_namespace(self, front_end: CSharpFrontEnd):
        source = (
            "namespace Sample;\n"
            "\n"
            "public class Widget\n"
            "{\n"
            "    public void Spin()\n"
            "    {\n"
            "        // TODO: spin faster\n"
            "    }\n"
            "}\n"
        )

        assert _context(front_end.parse(source), 6) == ("Spin", "Widget", "Sample")

    def test_trailing_file_comment(self, front_end: CSharpFrontEnd):
        tree = front_end.parse("class A { }\n// TODO: last\n")

        assert _context(tree, 1) == (None, None, None)

    def test_empty_source(self, front_end: CSharpFrontEnd):
        tree = front_end.parse("")

        assert list(iter_comment_trivia(tree)) == []
        assert [node.node_type for node in tree.tokens()] == ["end_of_file"]

    def test_invalid_source_still_scanned(self, front_end: CSharpFrontEnd):
        tree = front_end.parse("class Broken {\n    void M( {\n        // TODO: finish\n")

        assert [r.content for r in TodoCommentIdentifier().get_comments(tree)] == ["// TODO: finish"]


class TestJavaFrontEnd:
    """Tests for the Java front-end."""

    @pytest.fixture(scope="class")
    def front_end(self) -> JavaFrontEnd:
        return JavaFrontEnd()

    @pytest.fixture
    def tree(self, front_end: JavaFrontEnd, sample_java_code: str) -> SyntaxTree:
        return front_end.parse(sample_java_code)

    def test_language(self, front_end: JavaFrontEnd):
        assert front_end.language == Language.JAVA

    def test_file_extensions(self, front_end: JavaFrontEnd):
        assert ".java" in front_end.file_extensions

    def test_record_lines(self, tree: SyntaxTree):
        lines = [r.line for r in TodoCommentIdentifier().get_comments(tree)]

        assert lines == [2, 4, 7, 10, 12]

    def test_top_level_comment(self, tree: SyntaxTree):
        assert _context(tree, 2) == (None, None, None)

    def test_field_comment(self, tree: SyntaxTree):
        assert _context(tree, 4) == (None, "Worker", None)

    def test_method_comment(self, tree: SyntaxTree):
        assert _context(tree, 12) == ("run", "Worker", None)

    def test_constructor_comment(self, tree: SyntaxTree):
        member, type_name, namespace = _context(tree, 7)

        assert member == "Worker"
        assert type_name == "Worker"
        assert namespace is None

    def test_javadoc_is_structured(self, tree: SyntaxTree):
        docs = [
            trivia for trivia, _ in iter_comment_trivia(tree)
            if trivia.kind == TriviaKind.MULTI_LINE_DOC_COMMENT
        ]

        assert len(docs) == 1
        assert [child.text for child in docs[0].children] == ["/**", " TODO: describe ", "*/"]


class TestPythonFrontEnd:
    """Tests for the Python front-end."""

    @pytest.fixture(scope="class")
    def front_end(self) -> PythonFrontEnd:
        return PythonFrontEnd()

    def test_language(self, front_end: PythonFrontEnd):
        assert front_end.language == Language.PYTHON

    def test_comments(self, front_end: PythonFrontEnd, sample_python_code: str):
        tree = front_end.parse(sample_python_code)

        assert _context(tree, 0) == (None, None, None)
        assert _context(tree, 6) == ("load", "Loader", None)

    def test_hash_comments_are_single_line(self, front_end: PythonFrontEnd, sample_python_code: str):
        tree = front_end.parse(sample_python_code)

        kinds = {trivia.kind for trivia, _ in iter_comment_trivia(tree)}
        assert kinds == {TriviaKind.SINGLE_LINE_COMMENT}


class TestFrontEndRegistry:
    """Tests for the default registry."""

    def test_languages(self):
        registry = get_front_end_registry()

        assert set(registry.supported_languages) == {Language.CSHARP, Language.JAVA, Language.PYTHON}

    def test_lookup_by_file(self):
        registry = get_front_end_registry()

        assert registry.get_language_for_file("src/App/Service.cs") == Language.CSHARP
        assert registry.get_language_for_file("src\\App\\Legacy.CS") == Language.CSHARP
        assert registry.get_language_for_file("Worker.java") == Language.JAVA
        assert registry.get_front_end_for_file("README.md") is None
        assert not registry.is_supported("Makefile")
