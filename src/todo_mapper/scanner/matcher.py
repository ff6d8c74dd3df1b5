"""Predicates deciding which comments count as TODO comments."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from todo_mapper.config import DEFAULT_CONTAINS_MARKERS, DEFAULT_SUFFIX_MARKERS, Settings

# Any predicate over a comment's raw text (delimiters included)
CommentMatcher = Callable[[str], bool]


@dataclass(frozen=True, slots=True)
class SubstringMatcher:
    """
    Literal, case-sensitive marker matching.

    A comment matches when it contains any of `contains` or ends with
    any of `ends_with`. No regex, no whitespace normalization.
    """

    contains: tuple[str, ...] = DEFAULT_CONTAINS_MARKERS
    ends_with: tuple[str, ...] = DEFAULT_SUFFIX_MARKERS

    def __post_init__(self) -> None:
        if any(not marker for marker in (*self.contains, *self.ends_with)):
            raise ValueError("markers cannot be empty")

    def __call__(self, text: str) -> bool:
        return (
            any(marker in text for marker in self.contains)
            or any(text.endswith(marker) for marker in self.ends_with)
        )


DEFAULT_TODO_MATCHER: CommentMatcher = SubstringMatcher()


def default_todo_matcher(text: str) -> bool:
    """
    The standard TODO rule.

    Note that "/* TODO */" does not match: it contains none of the
    markers and ends with "*/" rather than "TODO".
    """
    return DEFAULT_TODO_MATCHER(text)


def matcher_from_markers(
    contains: Sequence[str], ends_with: Sequence[str]
) -> SubstringMatcher:
    return SubstringMatcher(contains=tuple(contains), ends_with=tuple(ends_with))


def matcher_from_settings(settings: Settings) -> SubstringMatcher:
    """Build the matcher configured by TODO_CONTAINS_MARKERS / TODO_SUFFIX_MARKERS."""
    return matcher_from_markers(
        settings.todo_contains_markers, settings.todo_suffix_markers
    )
