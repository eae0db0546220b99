"""End-to-end lint scenarios on real Swift source."""

import pytest

from async_closure_linter import lint
from tests.lint_test_utils import swift


def names(violations) -> list[str]:
    return [v.variable_name for v in violations]


def view_with(*properties: str) -> str:
    lines = ["struct MyView: View {"]
    lines.extend(f"    {prop}" for prop in properties)
    lines.append('    var body: some View { Text("") }')
    lines.append("}")
    return "\n".join(lines) + "\n"


class TestViolations:
    @pytest.mark.parametrize(
        ("declaration", "name"),
        [
            ("var onTap: () async -> Void", "onTap"),
            ("var onAction: (() async -> Void)?", "onAction"),
            ("var onSubmit: (() async -> Void)!", "onSubmit"),
            ("var onLoad: () async throws -> Void", "onLoad"),
            ("var onRefresh: (() async throws -> Void)?", "onRefresh"),
            ("var onSelect: (Int, String) async -> Void", "onSelect"),
            ("var fetchData: () async -> [String]", "fetchData"),
            ("let onTap: () async -> Void", "onTap"),
            ("var onTap: @Sendable () async -> Void", "onTap"),
            ("var onTap: @escaping () async -> Void", "onTap"),
            ("var onTap: @Sendable (Int) async -> Void", "onTap"),
            ("var onTap: (@Sendable () async -> Void)?", "onTap"),
            ("var onTap: @Sendable () async throws -> Void", "onTap"),
        ],
    )
    def test_async_closure_without_main_actor(self, linter, declaration: str, name: str) -> None:
        assert names(linter.lint(view_with(declaration))) == [name]

    def test_multiple_properties(self, linter) -> None:
        source = view_with(
            "var onLoad: () async -> Void",
            "var onRefresh: (() async throws -> Void)?",
            "var onSubmit: () async -> String",
        )
        assert names(linter.lint(source)) == ["onLoad", "onRefresh", "onSubmit"]

    def test_computed_property(self, linter) -> None:
        source = swift("""
            struct MyView: View {
                var onTap: () async -> Void {
                    return {}
                }
                var body: some View { Text("") }
            }
        """)
        assert names(linter.lint(source)) == ["onTap"]

    def test_nested_view_in_view(self, linter) -> None:
        source = swift("""
            struct OuterView: View {
                struct InnerView: View {
                    var onTap: () async -> Void
                    var body: some View { Text("") }
                }
                var body: some View { Text("") }
            }
        """)
        assert names(linter.lint(source)) == ["onTap"]

    def test_view_without_space_before_protocol(self, linter) -> None:
        source = swift("""
            struct MyView:View {
                var onTap: () async -> Void
                var body: some View { Text("") }
            }
        """)
        assert len(linter.lint(source)) == 1

    def test_multiple_views(self, linter) -> None:
        source = swift("""
            struct ViewA: View {
                var onTapA: () async -> Void
                var body: some View { Text("") }
            }

            struct ViewB: View {
                var onTapB: @MainActor () async -> Void
                var body: some View { Text("") }
            }

            struct ViewC: View {
                var onTapC: () async -> Void
                var body: some View { Text("") }
            }
        """)
        assert names(linter.lint(source)) == ["onTapA", "onTapC"]

    def test_declaration_after_nested_type_is_still_checked(self, linter) -> None:
        source = swift("""
            struct MyView: View {
                struct Inner {
                    var ok: () async -> Void
                }
                var onTap: () async -> Void
                var body: some View { Text("") }
            }
        """)
        assert names(linter.lint(source)) == ["onTap"]


class TestNoViolations:
    @pytest.mark.parametrize(
        "declaration",
        [
            "var onTap: @MainActor () async -> Void",
            "var onAction: (@MainActor () async -> Void)?",
            "var onSubmit: @MainActor () async throws -> Void",
            "var onTap: @MainActor @Sendable () async -> Void",
            "var onTap: () -> Void",
            "var onAction: (() -> Void)?",
            "var title: String",
        ],
    )
    def test_clean_declarations(self, linter, declaration: str) -> None:
        assert linter.lint(view_with(declaration)) == []

    @pytest.mark.parametrize(
        ("isolated", "unisolated"),
        [
            ("@MainActor () async -> Void", "() async -> Void"),
            ("@MainActor () async throws -> Void", "() async throws -> Void"),
            ("@MainActor @Sendable () async -> Void", "@Sendable () async -> Void"),
            ("@Sendable @MainActor () async -> Void", "@Sendable () async -> Void"),
            ("@MainActor @escaping () async -> Void", "@escaping () async -> Void"),
            ("(@MainActor () async -> Void)?", "(() async -> Void)?"),
            ("(@MainActor @Sendable () async -> Void)?", "(@Sendable () async -> Void)?"),
        ],
    )
    def test_main_actor_is_what_excuses_the_closure(
        self, linter, isolated: str, unisolated: str
    ) -> None:
        assert linter.lint(view_with(f"var onTap: {isolated}")) == []
        assert names(linter.lint(view_with(f"var onTap: {unisolated}"))) == ["onTap"]

    def test_non_view_struct(self, linter) -> None:
        source = swift("""
            struct NotAView {
                var onTap: () async -> Void
            }
        """)
        assert linter.lint(source) == []

    def test_class_with_async_closure(self, linter) -> None:
        source = swift("""
            class SomeClass {
                var onTap: () async -> Void = {}
            }
        """)
        assert linter.lint(source) == []

    def test_nested_struct_in_view(self, linter) -> None:
        source = swift("""
            struct MyView: View {
                struct Inner {
                    var onTap: () async -> Void
                }
                var body: some View { Text("") }
            }
        """)
        assert linter.lint(source) == []

    def test_file_without_view(self, linter) -> None:
        source = swift("""
            struct NotAModel {
                var onTap: () async -> Void
            }
            class DataManager {
                var onLoad: () async -> Void = {}
            }
        """)
        assert linter.lint(source) == []

    def test_file_without_async(self, linter) -> None:
        source = view_with("var onTap: () -> Void", "var title: String")
        assert linter.lint(source) == []

    def test_view_model_is_not_a_view(self, linter) -> None:
        source = swift("""
            struct Screen: ViewModel {
                var onTap: () async -> Void
            }
        """)
        assert linter.lint(source) == []

    def test_class_conforming_to_view(self, linter) -> None:
        source = swift("""
            class Legacy: View {
                var onTap: () async -> Void = {}
            }
        """)
        assert linter.lint(source) == []


class TestViolationDetails:
    def test_line_number(self, linter) -> None:
        source = swift("""
            import SwiftUI

            struct MyView: View {
                var title: String
                var onTap: () async -> Void
                var body: some View { Text("") }
            }
        """)
        (violation,) = linter.lint(source)
        assert violation.line == 5
        assert violation.column == 5

    def test_description(self, linter) -> None:
        (violation,) = linter.lint(view_with("var onTap: () async -> Void"), file_path="TestFile.swift")
        description = str(violation)
        assert "TestFile.swift" in description
        assert "onTap" in description
        assert "@MainActor" in description

    def test_default_file_label(self, linter) -> None:
        (violation,) = linter.lint(view_with("var onTap: () async -> Void"))
        assert violation.file_path == "<source>"

    def test_column_counts_bytes(self, linter) -> None:
        source = 'struct MyView: View { /* é */ var onTap: () async -> Void }\n'
        (violation,) = linter.lint(source)
        assert violation.line == 1
        assert violation.column == len('struct MyView: View { /* é */ '.encode("utf-8")) + 1

    def test_repeated_runs_are_identical(self, linter) -> None:
        source = view_with("var onTap: () async -> Void")
        assert linter.lint(source) == linter.lint(source)


def test_module_level_lint() -> None:
    (violation,) = lint(view_with("var onTap: () async -> Void"), "Inline.swift")
    assert violation.file_path == "Inline.swift"
