"""Tests for the style inference engine."""

import pytest

from smart_variables.models import ContextSnapshot, IdentifierRecord, NamingStyle
from smart_variables.styles import build_context, default_style, infer, infer_at, majority_style


def records(*styles: NamingStyle) -> list[IdentifierRecord]:
    return [IdentifierRecord(name=f"n{i}", style=s) for i, s in enumerate(styles)]


class TestMajority:
    def test_empty(self) -> None:
        assert majority_style([]) is None

    def test_strict_majority(self) -> None:
        found = records(NamingStyle.CAMEL, NamingStyle.CAMEL, NamingStyle.CAMEL, NamingStyle.SNAKE)
        assert majority_style(found) == NamingStyle.CAMEL

    def test_half_is_not_enough(self) -> None:
        found = records(NamingStyle.CAMEL, NamingStyle.CAMEL, NamingStyle.SNAKE, NamingStyle.SNAKE)
        assert majority_style(found) is None

    def test_plurality_is_not_enough(self) -> None:
        found = records(
            NamingStyle.CAMEL, NamingStyle.CAMEL, NamingStyle.SNAKE, NamingStyle.PASCAL, NamingStyle.UPPER
        )
        assert majority_style(found) is None


class TestInfer:
    def test_direct_pattern_beats_snapshot(self) -> None:
        snapshot = ContextSnapshot(is_type_definition=True, in_interface=True)
        line = "    public static final int MAX_SIZE = 100;"
        assert infer("java", line, snapshot) == NamingStyle.UPPER

    def test_no_snapshot_uses_default(self) -> None:
        assert infer("python", "x = compute()") == NamingStyle.SNAKE
        assert infer("javascript", "x = compute()") == NamingStyle.CAMEL

    def test_type_definition_context_is_pascal(self) -> None:
        snapshot = ContextSnapshot(is_type_definition=True)
        assert infer("typescript", "  ", snapshot) == NamingStyle.PASCAL

    def test_interface_context_is_pascal(self) -> None:
        snapshot = ContextSnapshot(in_interface=True, is_constant_context=True)
        assert infer("typescript", "  ", snapshot) == NamingStyle.PASCAL

    def test_class_member_in_class_is_pascal(self) -> None:
        snapshot = ContextSnapshot(in_class=True)
        assert infer("typescript", "  name: string;", snapshot) == NamingStyle.PASCAL

    def test_class_member_outside_class_is_not_pascal(self) -> None:
        assert infer("typescript", "  name: string;", ContextSnapshot()) == NamingStyle.CAMEL

    def test_constant_context_is_upper(self) -> None:
        snapshot = ContextSnapshot(is_constant_context=True)
        assert infer("python", "", snapshot) == NamingStyle.UPPER

    def test_enum_context_is_upper(self) -> None:
        snapshot = ContextSnapshot(in_enum=True, existing_identifiers=records(*[NamingStyle.CAMEL] * 5))
        assert infer("java", "    ", snapshot) == NamingStyle.UPPER

    def test_majority_vote(self) -> None:
        snapshot = ContextSnapshot(
            existing_identifiers=records(
                NamingStyle.CAMEL, NamingStyle.CAMEL, NamingStyle.CAMEL, NamingStyle.SNAKE
            )
        )
        assert infer("python", "value = 1", snapshot) == NamingStyle.CAMEL

    def test_tie_falls_back_to_default(self) -> None:
        snapshot = ContextSnapshot(
            existing_identifiers=records(
                NamingStyle.CAMEL, NamingStyle.CAMEL, NamingStyle.PASCAL, NamingStyle.PASCAL
            )
        )
        assert infer("python", "value = 1", snapshot) == NamingStyle.SNAKE

    def test_unknown_language_defaults_to_camel(self) -> None:
        assert infer("cobol", "MOVE A TO B", ContextSnapshot()) == NamingStyle.CAMEL

    def test_idempotent(self) -> None:
        snapshot = ContextSnapshot(existing_identifiers=records(NamingStyle.SNAKE, NamingStyle.SNAKE))
        first = infer("javascript", "let x", snapshot)
        assert all(infer("javascript", "let x", snapshot) == first for _ in range(5))
        assert first == NamingStyle.SNAKE

    def test_default_style_helper(self) -> None:
        assert default_style("c") == NamingStyle.SNAKE
        assert default_style("tsx") == NamingStyle.CAMEL


class TestEndToEnd:
    def test_python_snake_module(self) -> None:
        lines = [
            "import os",
            "",
            "def load_config(path):",
            "    raw_text = open(path).read()",
            "    ",
            "    return raw_text",
        ]
        assert infer_at(lines, 4, "python") == NamingStyle.SNAKE

    def test_javascript_follows_neighbours(self) -> None:
        lines = [
            "let user_name = 'a';",
            "let user_age = 3;",
            "let user_email = 'x';",
            "",
        ]
        assert infer_at(lines, 3, "javascript") == NamingStyle.SNAKE

    def test_java_class_body_constant(self) -> None:
        lines = [
            "public class Limits {",
            "    private static final int MAX_USERS = 10;",
            "    ",
            "}",
        ]
        snapshot = build_context(lines, 2, "java")
        assert snapshot.is_constant_context
        assert infer("java", snapshot.target_line, snapshot) == NamingStyle.UPPER

    @pytest.mark.parametrize("index", [-1, 10])
    def test_out_of_range_uses_default(self, index: int) -> None:
        assert infer_at(["x = 1"], index, "python") == NamingStyle.SNAKE

    def test_python_dunders_do_not_vote(self) -> None:
        lines = [
            '__all__ = ["load"]',
            '__version__ = "1.0"',
            '__author__ = "x"',
            "retry_count = 3",
            "",
        ]
        snapshot = build_context(lines, 4, "python")
        assert [r.name for r in snapshot.existing_identifiers] == ["retry_count"]
        assert infer_at(lines, 4, "python") == NamingStyle.SNAKE
