"""Tests for record loading from JSON and YAML."""

from __future__ import annotations

from pathlib import Path

import pytest

from recordcheck.infrastructure.records import (
    RecordLoadError,
    load_records,
    parse_inline,
    parse_text,
)


class TestParseText:
    def test_json_object(self) -> None:
        assert parse_text('{"a": 1}', fmt="json") == [{"a": 1}]

    def test_json_list(self) -> None:
        assert parse_text('[{"a": 1}, {"a": 2}]', fmt="json") == [{"a": 1}, {"a": 2}]

    def test_yaml_mapping(self) -> None:
        assert parse_text("email: a@b.com\nage: 30\n", fmt="yaml") == [
            {"email": "a@b.com", "age": 30}
        ]

    def test_yaml_list_yields_plain_dicts(self) -> None:
        records = parse_text("- a: 1\n- a: 2.5\n", fmt="yaml")
        assert records == [{"a": 1}, {"a": 2.5}]
        assert all(type(r) is dict for r in records)

    def test_empty_json_list(self) -> None:
        assert parse_text("[]", fmt="json") == []

    def test_scalar_rejected(self) -> None:
        with pytest.raises(RecordLoadError, match="expected a mapping or a list of mappings"):
            parse_text("42", fmt="json")

    def test_list_with_scalar_rejected(self) -> None:
        with pytest.raises(RecordLoadError, match="item 1 is a str"):
            parse_text('[{"a": 1}, "b"]', fmt="json")

    def test_invalid_json(self) -> None:
        with pytest.raises(RecordLoadError, match="could not parse JSON"):
            parse_text("{", fmt="json", source="in.json")

    def test_invalid_yaml(self) -> None:
        with pytest.raises(RecordLoadError, match="could not parse YAML"):
            parse_text("a: [1, 2\n", fmt="yaml")

    @pytest.mark.parametrize("fmt", ["json", "yaml"])
    def test_oversized_integer_literal(self, fmt: str) -> None:
        digits = "9" * 5000
        text = f'{{"age": {digits}}}' if fmt == "json" else f"age: {digits}"
        with pytest.raises(RecordLoadError, match=f"could not parse {fmt.upper()}"):
            parse_text(text, fmt=fmt)

    def test_unknown_format(self) -> None:
        with pytest.raises(RecordLoadError, match="Unsupported record format"):
            parse_text("", fmt="csv")


class TestParseInline:
    def test_object(self) -> None:
        assert parse_inline('{"email": "a@b.com"}') == {"email": "a@b.com"}

    def test_not_json(self) -> None:
        with pytest.raises(RecordLoadError, match="--data is not valid JSON"):
            parse_inline("email=a@b.com")

    def test_not_object(self) -> None:
        with pytest.raises(RecordLoadError, match="--data must be a JSON object, got list"):
            parse_inline("[1]")

    def test_oversized_integer_literal(self) -> None:
        with pytest.raises(RecordLoadError, match="--data is not valid JSON"):
            parse_inline('{"age": ' + "9" * 5000 + "}")


class TestLoadRecords:
    def test_json_file(self, tmp_path: Path) -> None:
        path = tmp_path / "users.json"
        path.write_text('[{"email": "a@b.com"}]', encoding="utf-8")
        assert load_records(path) == [{"email": "a@b.com"}]

    @pytest.mark.parametrize("suffix", [".yaml", ".yml", ".YAML"])
    def test_yaml_suffixes(self, tmp_path: Path, suffix: str) -> None:
        path = tmp_path / f"user{suffix}"
        path.write_text("email: a@b.com\n", encoding="utf-8")
        assert load_records(path) == [{"email": "a@b.com"}]

    def test_unsupported_suffix(self, tmp_path: Path) -> None:
        path = tmp_path / "users.csv"
        path.write_text("email\n", encoding="utf-8")
        with pytest.raises(RecordLoadError, match="unsupported file type .csv"):
            load_records(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(RecordLoadError, match="missing.json"):
            load_records(tmp_path / "missing.json")

    def test_non_utf8_file(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_bytes(b'{"email": "\xff"}')
        with pytest.raises(RecordLoadError, match="not valid UTF-8"):
            load_records(path)

    def test_empty_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        with pytest.raises(RecordLoadError, match="got NoneType"):
            load_records(path)
