"""Test settings_loader.py module."""
import argparse
from pathlib import Path
from unittest.mock import call
from unittest.mock import mock_open
from unittest.mock import patch

import pydantic
from pydantic import BaseModel
import pytest

from eeg_recorder.core.schema import DataKind
from eeg_recorder.core.settings import RecorderSettings
from eeg_recorder.util import runtime
from eeg_recorder.util import settings_loader


class _SettingsModel(BaseModel, extra="forbid"):
    number: int


class TestLoadSettings:
    """Test settings_loader.load_settings utility."""

    @patch("builtins.open", new_callable=mock_open, read_data="number: 1")
    def test_settings_loader_returns_parsed_settings(self, mock_open):
        """Test calling the settings_loader with a known settings_file."""
        settings_file = Path("some/path/on/disk")
        settings = settings_loader.load_settings(
            settings_file, settings_parser=_SettingsModel
        )
        assert settings.number == 1
        assert mock_open.call_count == 1
        assert mock_open.mock_calls[0] == call(settings_file, "r")

    @patch("builtins.open", new_callable=mock_open)
    def test_settings_loader_raises_exception_when_settings_file_is_not_found(
        self, mock_open
    ):
        """Test settings_loader raises an error for a missing file."""
        mock_open.side_effect = FileNotFoundError
        with pytest.raises(FileNotFoundError):
            settings_loader.load_settings("missing_file", _SettingsModel)

    @patch("builtins.open", new_callable=mock_open, read_data="number: not_an_int")
    def test_settings_loader_raises_exception_when_parsing_fails(self, mock_open):
        """Test settings_loader validates input types."""
        with pytest.raises(pydantic.ValidationError):
            settings_loader.load_settings("some/path/on/disk", _SettingsModel)

    @patch(
        "builtins.open", new_callable=mock_open, read_data="number: 1\nextra_field: 1"
    )
    def test_settings_loader_raises_exception_when_extra_yaml_field(self, mock_open):
        """Test settings_loader rejects fields that are not in the schema."""
        with pytest.raises(pydantic.ValidationError):
            settings_loader.load_settings("some/path/on/disk", _SettingsModel)

    @patch("builtins.open", new_callable=mock_open, read_data="number: 1")
    def test_settings_loader_overrides(self, mock_open):
        """Test calling the settings_loader with a known settings_file and overrides."""
        settings_file = Path("some/path/on/disk")
        settings = settings_loader.load_settings(
            settings_file,
            settings_parser=_SettingsModel,
            override_dotlist=["number=3"],
        )
        assert settings.number == 3

    @patch("builtins.open", new_callable=mock_open, read_data="number: 1")
    def test_settings_loader_raises_exception_when_invalid_override_key(
        self, mock_open
    ):
        """Test settings_loader rejects overrides that are not in the schema."""
        with pytest.raises(pydantic.ValidationError):
            settings_loader.load_settings(
                "some/path/on/disk", _SettingsModel, override_dotlist=["extra_field=1"]
            )


class TestGetScriptSettings:
    """Test settings_loader.get_script_settings utility."""

    def test_missing_default_settings_file(self, tmp_path, monkeypatch):
        """Test that an error is raised if the default file was not installed."""
        monkeypatch.setattr(runtime, "RECORDER_HOME", str(tmp_path))
        with pytest.raises(FileNotFoundError):
            settings_loader.get_script_settings(
                None, "settings_recorder.yaml", RecorderSettings
            )

    def test_default_settings_file(self, tmp_path, monkeypatch):
        """Test that the default file is loaded from the configs directory."""
        monkeypatch.setattr(runtime, "RECORDER_HOME", str(tmp_path))
        (tmp_path / "settings.yaml").write_text("number: 5")
        settings = settings_loader.get_script_settings(
            None, "settings.yaml", _SettingsModel
        )
        assert settings.number == 5

    def test_packaged_recorder_settings(self):
        """Test that the packaged default recorder settings are valid."""
        settings_file = Path(runtime.__file__).parent.parent.joinpath(
            "config", "settings_recorder.yaml"
        )
        settings = settings_loader.get_script_settings(
            settings_file,
            "settings_recorder.yaml",
            RecorderSettings,
            ["session.data_kind=DENOISED_PSD", "session.n_freq_bins=30"],
        )
        assert settings.session.data_kind == DataKind.DENOISED_PSD
        assert settings.session.n_freq_bins == 30

    def test_psd_settings_without_bins(self):
        """Test that PSD settings need the number of frequency bins."""
        settings_file = Path(runtime.__file__).parent.parent.joinpath(
            "config", "settings_recorder.yaml"
        )
        with pytest.raises(pydantic.ValidationError):
            settings_loader.get_script_settings(
                settings_file,
                "settings_recorder.yaml",
                RecorderSettings,
                ["session.data_kind=DENOISED_PSD"],
            )


class TestCheckConfigOverrideStr:
    """Test settings_loader.check_config_override_str."""

    def test_check_config_override_valid(self):
        """Test valid config override."""
        assert settings_loader.check_config_override_str("key=value") == "key=value"
        assert (
            settings_loader.check_config_override_str("key.subkey=value")
            == "key.subkey=value"
        )

    def test_check_config_override_str_invalid(self):
        """Test invalid config override."""
        with pytest.raises(argparse.ArgumentTypeError):
            settings_loader.check_config_override_str("=value")
        with pytest.raises(argparse.ArgumentTypeError):
            settings_loader.check_config_override_str("key..subkey=value")
