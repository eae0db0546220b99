"""Shared constants for the async closure linter."""

VIEW_PROTOCOL = "View"
MAIN_ACTOR_ATTRIBUTE = "MainActor"
ASYNC_KEYWORD = "async"
SOURCE_SUFFIX = ".swift"
DEFAULT_SOURCE_LABEL = "<source>"

VIOLATION_MESSAGE = (
    "Async closure property '{name}' in SwiftUI View should have @MainActor attribute"
)

OUTPUT_FORMATS: tuple[str, ...] = ("text", "json", "table")
DEFAULT_OUTPUT_FORMAT = "text"

CONFIG_SECTION = "async-closure-lint"
