"""Test for run_recorder.py."""

import argparse
from unittest import mock

import numpy as np
import pytest

from eeg_recorder.core.schema import DataKind
from eeg_recorder.core.session import SessionRecorder
from eeg_recorder.core.settings import RecorderSettings
from eeg_recorder.recorder import run_recorder
from eeg_recorder.util import runtime


@pytest.fixture
def samples_file(tmp_path):
    """Create a file with 3 raw EEG samples."""
    file_path = tmp_path / "eeg_samples.npz"
    np.savez(file_path, data=np.arange(12, dtype=float).reshape(3, 4))
    return file_path


@pytest.fixture
def spectra_file(tmp_path):
    """Create a file with 2 epochs of 4 channel spectra with 5 bins each."""
    file_path = tmp_path / "eeg_spectra.npz"
    np.savez(file_path, psd=np.ones((2, 4, 5)))
    return file_path


@pytest.fixture
def settings(samples_file, tmp_path) -> RecorderSettings:
    """Create settings that record the samples file."""
    return RecorderSettings.model_validate(
        {
            "log_level": "INFO",
            "session": {
                "data_kind": "RAW_EEG",
                "file_sequence_number": 2,
                "operator_name": "jane",
            },
            "task": {"difficulty": 3, "performance": 70},
            "input": {"file": str(samples_file)},
            "output": {"directory": str(tmp_path / "recordings")},
        }
    )


@pytest.fixture
def fake_parse_args(
    monkeypatch: pytest.MonkeyPatch, tmp_path, samples_file
) -> argparse.Namespace:
    """Fake command line arguments passed to the script."""
    settings_file = tmp_path / "settings_recorder.yaml"
    settings_file.write_text(
        "log_level: INFO\n"
        "session:\n"
        "  data_kind: FILTERED_EEG\n"
        "input:\n"
        f"  file: {samples_file}\n"
        "output:\n"
        f"  directory: {tmp_path / 'recordings'}\n"
    )
    parse_args_result = argparse.Namespace(
        settings_path=settings_file, overrides=["session.file_sequence_number=4"]
    )

    def parse_args(self, args=None, namespace=None):
        return parse_args_result

    monkeypatch.setattr("argparse.ArgumentParser.parse_args", parse_args)
    return parse_args_result


class TestRunRecorder:
    """Test execution of the run_recorder script."""

    def test_run_with_samples(self, settings, tmp_path):
        """Test that the samples are saved with the task metadata."""
        file_path = run_recorder.run_with_settings(settings)
        assert file_path == tmp_path / "recordings" / "janeRawEEG2.csv"
        lines = file_path.read_text().splitlines()
        assert len(lines) == 4
        assert lines[0].endswith("Channel 4")
        assert lines[1].split(",")[1:] == ["3", "70", "0.0", "1.0", "2.0", "3.0"]

    def test_run_with_spectra(self, settings, spectra_file, tmp_path):
        """Test that each epoch produces one row per channel."""
        settings.session.data_kind = DataKind.DENOISED_PSD
        settings.session.n_freq_bins = 5
        settings.input.file = spectra_file
        settings.input.data_array_name = "psd"
        file_path = run_recorder.run_with_settings(settings)
        lines = file_path.read_text().splitlines()
        assert file_path.name == "janeDenoisedPSD2.csv"
        assert len(lines) == 9
        assert [line.split(",")[3] for line in lines[1:]] == ["1", "2", "3", "4"] * 2

    def test_run_with_export(self, settings, tmp_path):
        """Test that the saved file is copied to the export directory."""
        settings.output.export_directory = tmp_path / "shared"
        file_path = run_recorder.run_with_settings(settings)
        assert file_path == tmp_path / "shared" / "janeRawEEG2.csv"
        assert (tmp_path / "recordings" / "janeRawEEG2.csv").exists()

    def test_default_output_directory(self, settings, tmp_path, monkeypatch):
        """Test that sessions are saved under RECORDER_HOME when no directory is set."""
        monkeypatch.setattr(runtime, "RECORDER_HOME", str(tmp_path / "home"))
        settings.output.directory = None
        file_path = run_recorder.run_with_settings(settings)
        assert file_path == tmp_path / "home" / "recordings" / "janeRawEEG2.csv"
        assert file_path.exists()

    def test_run_with_wrong_data_shape(self, settings, spectra_file):
        """Test that spectra cannot be recorded in a raw EEG session."""
        settings.input.file = spectra_file
        settings.input.data_array_name = "psd"
        with pytest.raises(ValueError):
            run_recorder.run_with_settings(settings)

    def test_save_error_is_raised(self, settings, tmp_path):
        """Test that persistence errors are reported."""
        settings.output.directory = tmp_path / "blocked"
        settings.output.directory.write_text("")
        with pytest.raises(OSError):
            run_recorder.run_with_settings(settings)

    def test_run(self, fake_parse_args, tmp_path):
        """Test run with a settings file and overrides."""
        run_recorder.run()
        assert (tmp_path / "recordings" / "FilteredEEG4.csv").exists()


class TestRecord:
    """Test appending data to a session."""

    def test_keyboard_interrupt_keeps_recorded_rows(self):
        """Test that the rows appended before an interrupt are kept."""
        recorder = SessionRecorder(notifier=mock.Mock())
        recorder.open(DataKind.RAW_EEG)

        def interrupted_samples():
            yield np.zeros(4)
            raise KeyboardInterrupt

        run_recorder.record(recorder, interrupted_samples())
        assert len(recorder) == 1
        assert recorder.is_recording
