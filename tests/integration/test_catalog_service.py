"""Integration tests for the Initialize and ListAvailableTypes commands."""

import io

from fspec.services.catalog_service import (
    FspecCommand,
    execute_command,
    initialize,
    list_available_types,
)

EXPECTED_LISTING = (
    "HttpWebEndpoint (1 params)\n"
    "    Url (required=true, type=ValidUrl)\n"
    "StaticList (1 params)\n"
    "    Values (required=true, type=StaticList)\n"
)


class TestCatalogCommands:
    """Tests for the catalog command functions."""

    def test_initialize_creates_catalog(self, test_settings, fetch_rows):
        initialize(test_settings)

        assert test_settings.database_path.is_file()
        assert fetch_rows("SELECT COUNT(*) FROM fspec_pipeline_type") == [(2,)]

    def test_list_after_initialize(self, test_settings, capsys):
        initialize(test_settings)

        types = list_available_types(test_settings)

        assert capsys.readouterr().out == EXPECTED_LISTING
        assert [spec.name for spec in types] == ["HttpWebEndpoint", "StaticList"]

    def test_list_on_fresh_directory(self, test_settings, capsys):
        list_available_types(test_settings)

        assert capsys.readouterr().out == EXPECTED_LISTING
        assert test_settings.database_path.is_file()

    def test_list_to_stream(self, test_settings, capsys):
        buffer = io.StringIO()

        list_available_types(test_settings, output=buffer)

        assert buffer.getvalue() == EXPECTED_LISTING
        assert capsys.readouterr().out == ""


class TestExecuteCommand:
    """Tests for execute_command dispatch."""

    def test_command_values(self):
        assert FspecCommand("init") is FspecCommand.Initialize
        assert FspecCommand("list") is FspecCommand.ListAvailableTypes

    def test_initialize(self, test_settings, capsys):
        execute_command(FspecCommand.Initialize, test_settings)

        assert test_settings.database_path.is_file()
        assert capsys.readouterr().out == ""

    def test_list(self, test_settings, capsys):
        execute_command(FspecCommand.ListAvailableTypes, test_settings)

        assert capsys.readouterr().out == EXPECTED_LISTING
