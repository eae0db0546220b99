"""Cheap textual gate run before parsing."""

import re

from async_closure_linter.domain.constants import ASYNC_KEYWORD, VIEW_PROTOCOL

# `struct Name<Generics>: A, View, B {` - over-approximates, never stricter
# than the declaration grammar.
_VIEW_STRUCT_PATTERN = re.compile(
    r"\bstruct\s+\w+[^:{]*:\s*[^{]*\b" + re.escape(VIEW_PROTOCOL) + r"\b"
)


class SourcePrefilter:
    """Rejects source text that cannot contain an async closure property in a View."""

    def __init__(self, pattern: "re.Pattern[str]" = _VIEW_STRUCT_PATTERN) -> None:
        self._pattern = pattern

    def might_contain_violation(self, source: str) -> bool:
        """False only when a violation is structurally impossible."""
        if ASYNC_KEYWORD not in source:
            return False
        return self._pattern.search(source) is not None
