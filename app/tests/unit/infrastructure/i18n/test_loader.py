"""Tests for infrastructure.i18n.loader module."""

from unittest.mock import patch

import pytest

from infrastructure.i18n.loader import (
    FileTranslationLoader,
    flatten_document,
    parse_source,
    read_source_document,
)
from tests.factories.i18n import write_locale_file


@pytest.mark.unit
class TestFlattenDocument:
    """Tests for flatten_document."""

    def test_flattens_nested_objects(self):
        """Nested keys are joined with dots."""
        document = {
            "actions": {"save": "Save", "cancel": "Cancel"},
            "stats": {"users": {"label": "Users"}},
            "title": "Dashboard",
        }

        assert flatten_document(document) == {
            "actions.save": "Save",
            "actions.cancel": "Cancel",
            "stats.users.label": "Users",
            "title": "Dashboard",
        }

    def test_drops_non_string_leaves(self):
        """Numbers, booleans, lists and nulls are dropped."""
        document = {
            "count": 3,
            "enabled": True,
            "items": ["a", "b"],
            "nothing": None,
            "label": "Label",
        }

        assert flatten_document(document) == {"label": "Label"}

    def test_empty_objects_produce_no_keys(self):
        """Empty nested objects contribute nothing."""
        assert flatten_document({"empty": {}, "deep": {"er": {}}}) == {}

    def test_empty_string_is_kept(self):
        """Empty strings are valid translations."""
        assert flatten_document({"blank": ""}) == {"blank": ""}

    def test_prefix_is_applied(self):
        """A prefix is prepended to every key."""
        assert flatten_document({"save": "Save"}, "actions.") == {
            "actions.save": "Save"
        }

    def test_renesting_reconstructs_document(self):
        """Splitting flat keys on dots rebuilds an all-string document."""
        document = {
            "title": "Dashboard",
            "actions": {"save": "Save", "cancel": "Cancel"},
            "stats": {"users": {"label": "Users", "hint": ""}},
        }

        rebuilt: dict = {}
        for key, value in flatten_document(document).items():
            *parents, leaf = key.split(".")
            node = rebuilt
            for parent in parents:
                node = node.setdefault(parent, {})
            node[leaf] = value

        assert rebuilt == document


@pytest.mark.unit
class TestParseSource:
    """Tests for parse_source."""

    def test_blank_text_is_empty_document(self):
        """Blank input parses to an empty document for every format."""
        assert parse_source("", ".json") == {}
        assert parse_source("  \n", ".yml") == {}

    def test_parses_json(self):
        """JSON sources are parsed with json."""
        assert parse_source('{"hello": "Hello"}', ".json") == {"hello": "Hello"}

    def test_parses_yaml(self):
        """YAML sources are parsed with yaml.safe_load."""
        assert parse_source("hello: Hello\nnested:\n  key: Value\n", ".yaml") == {
            "hello": "Hello",
            "nested": {"key": "Value"},
        }

    def test_invalid_json_raises(self):
        """Invalid JSON raises ValueError."""
        with pytest.raises(ValueError):
            parse_source("{not json", ".json")


@pytest.mark.unit
class TestReadSourceDocument:
    """Tests for read_source_document."""

    def test_reads_object_document(self, tmp_path):
        """A top-level object is returned as-is."""
        path = write_locale_file(tmp_path, "common.json", {"hello": "Hello"})
        assert read_source_document(path) == {"hello": "Hello"}

    def test_empty_file_is_empty(self, tmp_path):
        """An empty file is an empty document."""
        path = write_locale_file(tmp_path, "common.json", "")
        assert read_source_document(path) == {}

    def test_comment_only_yaml_is_empty(self, tmp_path):
        """A YAML file without content is an empty document."""
        path = write_locale_file(tmp_path, "common.yml", "# nothing yet\n")
        assert read_source_document(path) == {}

    @patch("infrastructure.i18n.loader.logger")
    def test_invalid_json_is_logged_and_empty(self, mock_logger, tmp_path):
        """Unparsable documents are treated as empty and logged."""
        path = write_locale_file(tmp_path, "broken.json", "{not json")

        assert read_source_document(path) == {}
        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args[0][0] == "translation_source_unreadable"

    @patch("infrastructure.i18n.loader.logger")
    def test_invalid_yaml_is_logged_and_empty(self, mock_logger, tmp_path):
        """Unparsable YAML documents are treated as empty and logged."""
        path = write_locale_file(tmp_path, "broken.yml", "key: [unclosed\n")

        assert read_source_document(path) == {}
        assert mock_logger.warning.call_args[0][0] == "translation_source_unreadable"

    @patch("infrastructure.i18n.loader.logger")
    def test_non_object_document_is_logged_and_empty(self, mock_logger, tmp_path):
        """A top-level array is treated as empty and logged."""
        path = write_locale_file(tmp_path, "list.json", ["a", "b"])

        assert read_source_document(path) == {}
        mock_logger.warning.assert_called_once_with(
            "translation_source_invalid",
            file=str(path),
            expected="object",
            got="list",
        )


@pytest.mark.unit
class TestFileTranslationLoader:
    """Tests for FileTranslationLoader."""

    def test_entries_are_namespaced(self, locales_dir):
        """Entries combine the file namespace with the flattened key."""
        entries = dict(FileTranslationLoader().entries(locales_dir / "en"))

        assert entries == {
            "common.hello": "Hello",
            "common.goodbye": "Goodbye",
            "common.actions.save": "Save",
            "common.actions.cancel": "Cancel",
            "features.dashboard.title": "Dashboard",
            "features.dashboard.stats.users": "Users",
        }

    def test_entries_reflect_current_files(self, tmp_path):
        """Files are re-read on every call."""
        path = write_locale_file(tmp_path, "common.json", {"hello": "Hello"})
        loader = FileTranslationLoader()
        assert dict(loader.entries(tmp_path)) == {"common.hello": "Hello"}

        write_locale_file(tmp_path, "common.json", {"hello": "Hi"})
        assert path.exists()
        assert dict(loader.entries(tmp_path)) == {"common.hello": "Hi"}

    def test_missing_locale_has_no_entries(self, tmp_path):
        """A missing locale directory yields no entries."""
        assert list(FileTranslationLoader().entries(tmp_path / "fr")) == []

    def test_invalid_source_does_not_block_others(self, tmp_path):
        """One broken file does not prevent other files from loading."""
        write_locale_file(tmp_path, "broken.json", "{oops")
        write_locale_file(tmp_path, "common.json", {"hello": "Hello"})

        assert dict(FileTranslationLoader().entries(tmp_path)) == {
            "common.hello": "Hello"
        }
