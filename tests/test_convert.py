"""Tests for the YAML conversion."""

import pytest
import yaml

from pyinidex import (
    DuplicateKey,
    EmptyKeyOrValue,
    FileOpenError,
    IniParser,
    IniYamlParser,
    InvalidIniLayout,
)


class TestIniYamlParser:
    def test_export_layout(self, tmp_path, server_text):
        path = tmp_path / "server.yaml"

        IniYamlParser(path).write(IniParser.loads(server_text))

        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        assert data == [{
            "section": "server",
            "line": 1,
            "keys": [
                {"key": "port", "value": "8080", "line": 2},
                {"key": "debug", "value": "yes", "line": 3},
            ],
        }]

    def test_round_trip(self, tmp_path, duplicated_text):
        path = tmp_path / "sample.yaml"
        store = IniParser.loads(duplicated_text)

        IniYamlParser(path).write(store)
        again = IniYamlParser(path).read()

        assert IniParser.dumps(again) == IniParser.dumps(store)
        assert again.count("plugin") == 2
        assert again.occurrences("plugin")[1].line_of("weight") == 12

    def test_numbers_kept_as_text(self):
        store = IniYamlParser.from_sections([
            {"section": "s", "line": 1,
             "keys": [{"key": 1, "value": 2.5, "line": 2}]},
        ])

        assert store.occurrences("s")[0]["1"] == "2.5"

    def test_duplicate_key(self):
        with pytest.raises(DuplicateKey) as exc:
            IniYamlParser.from_sections([
                {"section": "s", "line": 1, "keys": [
                    {"key": "k", "value": "1", "line": 2},
                    {"key": "k", "value": "2", "line": 3},
                ]},
            ])

        assert exc.value.line == 3

    def test_empty_document(self):
        assert len(IniYamlParser.from_sections(None)) == 0

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileOpenError):
            IniYamlParser(tmp_path / "nope.yaml").read()

    @pytest.mark.parametrize("pair", [
        {"key": "k", "value": "", "line": 2},
        {"key": "k", "value": "   ", "line": 2},
        {"key": "k", "value": None, "line": 2},
        {"key": "", "value": "v", "line": 2},
        {"value": "v", "line": 2},
    ])
    def test_empty_key_or_value(self, pair):
        with pytest.raises(EmptyKeyOrValue) as exc:
            IniYamlParser.from_sections(
                [{"section": "s", "line": 1, "keys": [pair]}])

        assert exc.value.line == 2

    def test_pairs_trimmed_like_text(self):
        store = IniYamlParser.from_sections([
            {"section": "s", "line": 1,
             "keys": [{"key": " k ", "value": " v\t", "line": 2}]},
        ])

        assert dict(store.occurrences("s")[0]) == {"k": "v\t"}
        again = IniParser.loads(IniParser.dumps(store))
        assert dict(again.occurrences("s")[0]) == {"k": "v\t"}

    @pytest.mark.parametrize("data", [
        {"section": "s"},
        "plain text",
        [{"line": 1, "keys": []}],
        ["s"],
        [{"section": "s", "keys": {"k": "v"}}],
        [{"section": "s", "keys": ["k = v"]}],
        [{"section": "s", "line": "one"}],
        [{"section": "s", "keys": [{"key": "k", "value": "v", "line": -1}]}],
    ])
    def test_malformed_layout(self, data):
        with pytest.raises(InvalidIniLayout):
            IniYamlParser.from_sections(data)

    def test_broken_yaml_file(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("- section: [s\n", encoding="utf-8")

        with pytest.raises(InvalidIniLayout) as exc:
            IniYamlParser(path).read()

        assert str(path) in str(exc.value)
