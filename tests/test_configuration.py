"""Tests for the MoveWebsiteFiles configuration fragment."""

import pytest
from pydantic import ValidationError

from websitemover.config import (
    MoveWebsiteFilesConfiguration,
    load_configuration,
    read_configuration_file,
    to_xml,
    write_configuration_file,
)
from websitemover.config.xml_fragment import parse_boolean
from websitemover.errors import ConfigurationParseError


class TestParseBoolean:
    """Tests for XML boolean literals."""

    @pytest.mark.parametrize("text", ["true", "TRUE", "True", "1", " true "])
    def test_true_literals(self, text):
        """Test accepted spellings of true."""
        assert parse_boolean(text) is True

    @pytest.mark.parametrize("text", ["false", "FALSE", "False", "0", "\nfalse\n"])
    def test_false_literals(self, text):
        """Test accepted spellings of false."""
        assert parse_boolean(text) is False

    @pytest.mark.parametrize("text", ["yes", "no", "2", "", None, "tru e"])
    def test_invalid_literals(self, text):
        """Test that anything else is rejected."""
        with pytest.raises(ConfigurationParseError):
            parse_boolean(text)


class TestLoadConfiguration:
    """Tests for load_configuration."""

    def test_none_fragment_gives_defaults(self):
        """Test that a missing fragment yields the default."""
        assert load_configuration(None).use_direct_move is False

    def test_empty_fragment_gives_defaults(self):
        """Test that an empty fragment yields the default."""
        assert load_configuration("").use_direct_move is False
        assert load_configuration("   ").use_direct_move is False

    def test_missing_node_gives_defaults(self):
        """Test that a fragment without useDirectMove yields the default."""
        assert load_configuration("<configuration />").use_direct_move is False

    def test_reads_true(self):
        """Test reading an enabled flag."""
        fragment = "<configuration><useDirectMove>true</useDirectMove></configuration>"
        assert load_configuration(fragment).use_direct_move is True

    def test_reads_numeric_literal(self):
        """Test reading the numeric form of a boolean."""
        fragment = "<configuration><useDirectMove>1</useDirectMove></configuration>"
        assert load_configuration(fragment).use_direct_move is True

    def test_reads_wrapped_configuration(self):
        """Test a host element wrapping the configuration."""
        fragment = (
            '<PlugInConfig id="MoveWebsiteFiles">'
            "<configuration><useDirectMove>True</useDirectMove></configuration>"
            "</PlugInConfig>"
        )
        assert load_configuration(fragment).use_direct_move is True

    def test_malformed_xml_raises(self):
        """Test that malformed XML raises a parse error."""
        with pytest.raises(ConfigurationParseError):
            load_configuration("<configuration><useDirectMove>true</configuration>")

    def test_malformed_boolean_raises(self):
        """Test that a bad boolean raises a parse error."""
        with pytest.raises(ConfigurationParseError):
            load_configuration("<configuration><useDirectMove>maybe</useDirectMove></configuration>")

    def test_parse_error_is_value_error(self):
        """Test that parse errors can be handled as ValueError."""
        with pytest.raises(ValueError):
            load_configuration("not xml")


class TestToXml:
    """Tests for to_xml."""

    def test_serializes_false(self):
        """Test the exact fragment for the default."""
        assert to_xml(MoveWebsiteFilesConfiguration()) == (
            "<configuration><useDirectMove>false</useDirectMove></configuration>"
        )

    def test_serializes_true(self):
        """Test the exact fragment for an enabled flag."""
        assert to_xml(MoveWebsiteFilesConfiguration(use_direct_move=True)) == (
            "<configuration><useDirectMove>true</useDirectMove></configuration>"
        )

    @pytest.mark.parametrize("flag", [True, False])
    def test_round_trip(self, flag):
        """Test that serializing a loaded fragment gives the same fragment."""
        fragment = to_xml(MoveWebsiteFilesConfiguration(use_direct_move=flag))
        assert to_xml(load_configuration(fragment)) == fragment


class TestClone:
    """Tests for MoveWebsiteFilesConfiguration.clone."""

    def test_clone_equals_original(self):
        """Test that a clone has the same value."""
        config = MoveWebsiteFilesConfiguration(use_direct_move=True)
        assert config.clone() == config

    def test_clone_is_independent(self):
        """Test that editing a clone leaves the original untouched."""
        config = MoveWebsiteFilesConfiguration(use_direct_move=False)
        clone = config.clone()

        clone.use_direct_move = True

        assert config.use_direct_move is False
        assert clone is not config

    def test_unknown_fields_rejected(self):
        """Test that the model forbids unknown fields."""
        with pytest.raises(ValidationError):
            MoveWebsiteFilesConfiguration(use_fast_move=True)


class TestConfigurationFiles:
    """Tests for reading and writing fragment files."""

    def test_missing_file_gives_defaults(self, tmp_path):
        """Test reading a fragment that was never saved."""
        assert read_configuration_file(tmp_path / "missing.xml").use_direct_move is False

    def test_write_then_read(self, tmp_path):
        """Test saving a fragment into a new folder."""
        path = tmp_path / "plugins" / "MoveWebsiteFiles.xml"

        write_configuration_file(path, MoveWebsiteFilesConfiguration(use_direct_move=True))

        assert path.read_text(encoding="utf-8") == (
            "<configuration><useDirectMove>true</useDirectMove></configuration>"
        )
        assert read_configuration_file(path).use_direct_move is True

    def test_undecodable_file_is_a_parse_error(self, tmp_path):
        """Test that bytes invalid in the declared encoding are reported as malformed."""
        path = tmp_path / "MoveWebsiteFiles.xml"
        path.write_bytes(b"<configuration><useDirectMove>\xff</useDirectMove></configuration>")

        with pytest.raises(ConfigurationParseError):
            read_configuration_file(path)

    def test_encoding_declaration_honoured(self, tmp_path):
        """Test reading a fragment saved in a declared non-UTF-8 encoding."""
        path = tmp_path / "MoveWebsiteFiles.xml"
        path.write_bytes(
            '<?xml version="1.0" encoding="ISO-8859-1"?>'
            "<configuration><!-- réglages --><useDirectMove>true</useDirectMove></configuration>"
            .encode("latin-1")
        )

        assert read_configuration_file(path).use_direct_move is True
