"""Models for parsing and validating the contents of `settings_recorder.yaml`."""
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel
from pydantic import model_validator

from eeg_recorder.core.schema import DataKind


class LogLevel(str, Enum):
    """Possible log levels."""

    _DEBUG = "DEBUG"
    _INFO = "INFO"
    _ERROR = "ERROR"
    _WARNING = "WARNING"
    _CRITICAL = "CRITICAL"


class SessionSettings(BaseModel, extra="forbid"):
    """Settings for the recording session."""

    data_kind: DataKind
    n_freq_bins: int = 0
    file_sequence_number: int = 1
    operator_name: str = ""

    @model_validator(mode="after")
    def freq_bins_are_set_for_psd(self):
        if self.data_kind.is_spectral and self.n_freq_bins < 1:
            raise ValueError(
                "n_freq_bins needs to be at least 1 to record"
                f" {self.data_kind.title} data"
            )
        return self


class TaskSettings(BaseModel, extra="forbid"):
    """Task information recorded in every row."""

    difficulty: int = 0
    performance: int = 0


class RecorderSettings(BaseModel, extra="forbid"):
    """Settings for running the recorder."""

    class Input(BaseModel, extra="forbid"):
        """Settings for reading in from a .npz file."""

        file: Path
        data_array_name: str = "data"

    class Output(BaseModel, extra="forbid"):
        """Settings for storing and exporting the recorded file."""

        directory: Optional[Path] = None
        export_directory: Optional[Path] = None

    log_level: LogLevel
    session: SessionSettings
    task: TaskSettings = TaskSettings()
    input: Input
    output: Output
