r"""Script for recording EEG data into a CSV file.

The recorder default configuration is located in
`RECORDER_HOME/settings_recorder.yaml` (see
:mod:`eeg_recorder.scripts.post_install_config`). The script can use a different
config file specified via the `\--settings-path` argument, and individual values
can be replaced with `\--overrides key.subkey=value`.

The recorder reads the samples (or power spectra) from a `.npz` file, records them
in a session tagged with the configured task difficulty and performance, saves the
session into the output directory and, if configured, exports the file.
"""
import argparse
import logging
from pathlib import Path
from typing import cast

from numpy import ndarray

from eeg_recorder.core.inputs import load_npz_array
from eeg_recorder.core.outputs import CopyExporter
from eeg_recorder.core.outputs import FileOutput
from eeg_recorder.core.session import SessionRecorder
from eeg_recorder.core.settings import RecorderSettings
from eeg_recorder.util.runtime import configure_logger
from eeg_recorder.util.runtime import get_abs_path
from eeg_recorder.util.runtime import get_recordings_dir
from eeg_recorder.util.settings_loader import check_config_override_str
from eeg_recorder.util.settings_loader import get_script_settings

logger = logging.getLogger(__name__)


def _parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Run recorder.")
    parser.add_argument(
        "--settings-path",
        type=Path,
        help="Path to the settings_recorder.yaml file.",
    )
    parser.add_argument(
        "--overrides",
        "-o",
        nargs="*",
        type=check_config_override_str,
        help=(
            "Specify settings overrides as key-value pairs, separated by spaces."
            " For example: -o log_level=DEBUG session.operator_name=jane"
        ),
    )
    return parser.parse_args()


def _validate_data_shape(data: ndarray, is_spectral: bool):
    expected_dims = 3 if is_spectral else 2
    if data.ndim != expected_dims:
        raise ValueError(
            f"Expected data with {expected_dims} dimensions, "
            f"received data with shape {data.shape}"
        )


def record(recorder: SessionRecorder, data: ndarray) -> None:
    """Append every sample or spectrum of `data` to the recording session.

    A keyboard interrupt stops appending and keeps the rows recorded so far.

    Args:
        recorder: A recorder with an open session.
        data: Samples of shape (N, C), or spectra of shape (N, C, F) for power
          spectral density sessions.
    """
    if recorder.schema is not None and recorder.schema.kind.is_spectral:
        append = recorder.append_psd
    else:
        append = recorder.append_sample
    try:
        for epoch in data:
            append(epoch)
    except KeyboardInterrupt:
        logger.info("CTRL+C received. Saving the data recorded so far...")


def _get_output_dir(settings: RecorderSettings) -> str:
    if settings.output.directory is None:
        return get_recordings_dir()
    return get_abs_path(settings.output.directory)


def run_with_settings(settings: RecorderSettings) -> Path:
    """Record the input data using the given settings.

    Args:
        settings: The recorder settings.

    Returns:
        The path of the saved session file, or of its exported copy if an export
        directory is configured.
    """
    session_settings = settings.session
    data = load_npz_array(
        get_abs_path(settings.input.file), settings.input.data_array_name
    )
    _validate_data_shape(data, session_settings.data_kind.is_spectral)

    recorder = SessionRecorder()
    recorder.update_operator_name(session_settings.operator_name)
    recorder.update_metadata(settings.task.difficulty, settings.task.performance)
    recorder.open(
        session_settings.data_kind,
        freq_bin_count=session_settings.n_freq_bins,
        file_sequence_number=session_settings.file_sequence_number,
    )
    record(recorder, data)
    output = recorder.finalize()

    try:
        file_path = FileOutput(_get_output_dir(settings)).save(output)
        if settings.output.export_directory is not None:
            file_path = CopyExporter(settings.output.export_directory).export(
                file_path
            )
    except OSError:
        logger.error(f"Could not save {output.destination_name}")
        raise
    return file_path


def run():
    """Load the configuration and start the recorder."""
    args = _parse_args()
    settings = cast(
        RecorderSettings,
        get_script_settings(
            args.settings_path,
            "settings_recorder.yaml",
            RecorderSettings,
            args.overrides,
        ),
    )
    configure_logger("eeg-recorder", settings.log_level)
    file_path = run_with_settings(settings)
    logger.info(f"Saved {file_path}")


if __name__ == "__main__":
    run()
