"""
Tests for utility helper functions.

This module tests the helper utility functions in utils/helpers.py.
"""
import os
import sys
import json
import tempfile
from pathlib import Path

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from roster import InvalidArgument, Roster
from utils.helpers import (
    ensure_directory,
    save_json,
    load_json,
    rosters_from_document,
    rosters_to_document
)

class TestDirectoryFunctions:
    """Tests for directory-related utility functions."""

    def test_ensure_directory_creates_nested_directories(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            nested_dir = Path(temp_dir) / "level1" / "level2"
            assert not nested_dir.exists()

            ensure_directory(nested_dir)
            assert nested_dir.is_dir()

    def test_ensure_directory_with_existing_directory(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            # This should not raise an exception
            ensure_directory(temp_dir)
            assert Path(temp_dir).exists()

class TestJsonFunctions:
    """Tests for JSON-related utility functions."""

    def test_save_json_creates_file_and_directories(self, tmp_path):
        test_file = tmp_path / "out" / "rosters.json"
        data = {"first turn": ["one", "two"]}

        assert save_json(data, test_file) is True
        with open(test_file, 'r', encoding='utf-8') as f:
            assert json.load(f) == data

    def test_load_json_reads_file(self, tmp_path):
        test_file = tmp_path / "rosters.json"
        test_file.write_text('{"a": ["x"]}', encoding='utf-8')
        assert load_json(test_file) == {"a": ["x"]}

    def test_load_json_missing_file_returns_none(self, tmp_path):
        assert load_json(tmp_path / "missing.json") is None

    def test_load_json_invalid_json_returns_none(self, tmp_path):
        test_file = tmp_path / "broken.json"
        test_file.write_text("{not json", encoding='utf-8')
        assert load_json(test_file) is None

class TestRosterDocuments:
    """Tests for converting between roster documents and rosters."""

    def test_mapping_document(self):
        rosters = rosters_from_document({"first": ["one", "two"], "second": []})

        assert [r.name for r in rosters] == ["first", "second"]
        assert rosters[0].pop() == "two"
        assert rosters[1].is_empty()

    def test_list_document(self):
        document = {"rosters": [
            {"name": "first", "elements": ["one", "two", "three"]},
            {"name": "second"},
        ]}
        rosters = rosters_from_document(document)

        assert [r.name for r in rosters] == ["first", "second"]
        assert rosters[0].elements() == ("one", "two", "three")
        assert rosters[1].size() == 0

    @pytest.mark.parametrize("document", [
        ["first", "second"],
        {"first": "one"},
        {"first": ["one", ""]},
        {"first": [1]},
        {"": ["one"]},
        {"rosters": ["first"]},
        {"rosters": [{"elements": ["one"]}]},
    ])
    def test_invalid_documents_rejected(self, document):
        with pytest.raises(InvalidArgument):
            rosters_from_document(document)

    def test_rosters_to_document(self):
        rosters = [Roster("a").push("x").push("y"), Roster("b")]
        assert rosters_to_document(rosters) == {"a": ["x", "y"], "b": []}
