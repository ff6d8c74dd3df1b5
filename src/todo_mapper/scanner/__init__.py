"""Comment scanning: trivia walk, TODO matching and scope resolution."""

from todo_mapper.scanner.identifier import TodoCommentIdentifier
from todo_mapper.scanner.matcher import (
    DEFAULT_TODO_MATCHER,
    CommentMatcher,
    SubstringMatcher,
    default_todo_matcher,
    matcher_from_settings,
)
from todo_mapper.scanner.scope import (
    find_enclosing,
    find_enclosing_member,
    find_enclosing_namespace,
    find_enclosing_type,
)
from todo_mapper.scanner.walker import (
    CommentLocatingWalker,
    SyntaxWalker,
    iter_comment_trivia,
    traverse,
)

__all__ = [
    "DEFAULT_TODO_MATCHER",
    "CommentLocatingWalker",
    "CommentMatcher",
    "SubstringMatcher",
    "SyntaxWalker",
    "TodoCommentIdentifier",
    "default_todo_matcher",
    "find_enclosing",
    "find_enclosing_member",
    "find_enclosing_namespace",
    "find_enclosing_type",
    "iter_comment_trivia",
    "matcher_from_settings",
    "traverse",
]
