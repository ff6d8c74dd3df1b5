"""Pytest configuration and fixtures."""

import pytest

from todo_mapper.core import DeclarationKind, Span, SyntaxTree, SyntaxTreeBuilder, Trivia, TriviaKind


def line_comment(text: str, line: int, column: int = 0) -> Trivia:
    """A single-line comment trivia starting at (line, column)."""
    return Trivia(
        TriviaKind.SINGLE_LINE_COMMENT,
        text,
        Span(line, column, line, column + len(text)),
    )


def whitespace(text: str, line: int) -> Trivia:
    return Trivia(TriviaKind.WHITESPACE, text, Span(line, 0, line, len(text)))


@pytest.fixture
def sample_tree() -> SyntaxTree:
    """
    Hand-built tree for:

        0  namespace App {  // TODO: in namespace
        1    class Widget {
        2      void Run() {  // TODO: in method
        3      }
        4      // TODO: between members
        5    }
        6  }
        7  // TODO: end of file
    """
    builder = SyntaxTreeBuilder()
    root = builder.add_node("compilation_unit", parent=None)
    namespace = builder.add_node(
        "namespace_declaration",
        parent=root,
        kind=DeclarationKind.MEMBER | DeclarationKind.NAMESPACE,
        name="App",
    )
    builder.add_token("namespace", parent=namespace)
    builder.add_token("App", parent=namespace, node_type="identifier")
    body = builder.add_node("declaration_list", parent=namespace)
    builder.add_token("{", parent=body, trailing=[line_comment("// TODO: in namespace", 0, 16)])

    widget = builder.add_node(
        "class_declaration",
        parent=body,
        kind=DeclarationKind.MEMBER | DeclarationKind.TYPE,
        name="Widget",
    )
    builder.add_token("class", parent=widget, leading=[whitespace("  ", 1)])
    builder.add_token("Widget", parent=widget, node_type="identifier")
    members = builder.add_node("declaration_list", parent=widget)
    builder.add_token("{", parent=members)

    run = builder.add_node("method_declaration", parent=members, kind=DeclarationKind.MEMBER, name="Run")
    builder.add_token("void", parent=run)
    builder.add_token("Run", parent=run, node_type="identifier")
    block = builder.add_node("block", parent=run)
    builder.add_token("{", parent=block, trailing=[line_comment("// TODO: in method", 2, 17)])
    builder.add_token("}", parent=block)

    builder.add_token(
        "",
        parent=members,
        node_type="trivia_anchor",
        leading=[line_comment("// TODO: between members", 4, 4)],
    )
    builder.add_token("}", parent=members)
    builder.add_token("}", parent=body)
    builder.add_token(
        "",
        parent=root,
        node_type="end_of_file",
        leading=[line_comment("// TODO: end of file", 7)],
    )
    return builder.build()


@pytest.fixture
def sample_csharp_code() -> str:
    """Sample C# code; line numbers in comments below are 0-indexed."""
    return """\
// TODO: file header
using System;

namespace Sample.Services
{
    /// <summary>TODO: document</summary>
    public class DataService
    {
        private int _count; // TODO: make readonly

        public DataService()
        {
            // TODO: inject dependencies
            _count = 0;
        }

        // TODO: split this class

        public int Count
        {
            get { return _count; } // TODO[perf] cache
        }

        public void Process()
        {
            var x = 1; // TODO
            /* TODO */
        }

        private class Nested
        {
            void Inner()
            {
                // TODO: nested work
            }
        }
    }
}
"""


@pytest.fixture
def sample_java_code() -> str:
    """Sample Java code for testing front-ends."""
    return """\
package com.example;

// TODO: move to shared module
public class Worker {
    private int retries; // TODO: configurable

    public Worker() {
        // TODO: validate
    }

    /** TODO: describe */
    public void run() {
        int x = 0; //TODO tune
    }
}
"""


@pytest.fixture
def sample_python_code() -> str:
    """Sample Python code for testing front-ends."""
    return """\
# TODO: module level
import os


class Loader:
    def load(self, path):
        # TODO: handle missing files
        return open(path).read()
"""
