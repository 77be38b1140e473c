"""Column layout of the recorded CSV files."""
from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from typing import Tuple

from eeg_recorder.errors import InvalidSchema

DEFAULT_CHANNEL_COUNT = 4
"""Number of EEG channels of the headset. Raw and filtered rows always use it."""

METADATA_COLUMNS = ("Timestamp (ms)", "Difficulty", "Performance")


class DataKind(str, Enum):
    """Possible types of data that can be recorded."""

    RAW_EEG = "RAW_EEG"
    FILTERED_EEG = "FILTERED_EEG"
    DENOISED_PSD = "DENOISED_PSD"

    @property
    def title(self) -> str:
        """Stem used when naming the recorded file."""
        return _TITLES[self]

    @property
    def is_spectral(self) -> bool:
        """Whether rows hold power spectral densities instead of samples."""
        return self is DataKind.DENOISED_PSD


_TITLES = {
    DataKind.RAW_EEG: "RawEEG",
    DataKind.FILTERED_EEG: "FilteredEEG",
    DataKind.DENOISED_PSD: "DenoisedPSD",
}


@dataclass(frozen=True)
class RowSchema:
    """Fixed column layout for a recording session.

    Sample rows (raw or filtered EEG) have one column per channel. PSD rows have a
    channel index column followed by one column per frequency bin, and each channel
    of a spectrum is recorded on its own row.
    """

    kind: DataKind
    channel_count: int = DEFAULT_CHANNEL_COUNT
    freq_bin_count: int = 0
    column_names: Tuple[str, ...] = field(init=False)

    def __post_init__(self):
        """Compute the column names from the data kind."""
        if self.kind.is_spectral:
            value_columns = ("Channel",) + tuple(
                f"{i} hz" for i in range(1, self.freq_bin_count + 1)
            )
        else:
            value_columns = tuple(
                f"Channel {i}" for i in range(1, DEFAULT_CHANNEL_COUNT + 1)
            )
        object.__setattr__(self, "column_names", METADATA_COLUMNS + value_columns)

    @classmethod
    def build(
        cls,
        kind: DataKind,
        channel_count: int = DEFAULT_CHANNEL_COUNT,
        freq_bin_count: int = 0,
    ) -> RowSchema:
        """Create a schema after validating its parameters.

        Args:
            kind: Type of data that will be recorded.
            channel_count: Number of values in each sample. Raw and filtered
              EEG only accept :data:`DEFAULT_CHANNEL_COUNT`.
            freq_bin_count: Number of frequency bins of each spectrum. Only used
              for :attr:`DataKind.DENOISED_PSD`.

        Returns:
            The new schema.

        Raises:
            InvalidSchema: If the data kind is unknown, the channel count is not
              valid for the data kind or a PSD schema is requested without
              frequency bins.
        """
        try:
            kind = DataKind(kind)
        except ValueError as error:
            raise InvalidSchema(f"Unknown data kind: {kind}") from error
        if channel_count < 1:
            raise InvalidSchema(
                f"Channel count must be at least 1, got {channel_count}"
            )
        if not kind.is_spectral and channel_count != DEFAULT_CHANNEL_COUNT:
            raise InvalidSchema(
                f"{kind.title} data has {DEFAULT_CHANNEL_COUNT} channels,"
                f" got {channel_count}"
            )
        if kind.is_spectral and freq_bin_count < 1:
            raise InvalidSchema(
                f"{kind.title} data needs at least 1 frequency bin,"
                f" got {freq_bin_count}"
            )
        return cls(kind, channel_count, freq_bin_count)

    @property
    def n_columns(self) -> int:
        """Number of comma separated fields in every line."""
        return len(self.column_names)

    @property
    def n_values(self) -> int:
        """Number of data values expected in every row."""
        return self.freq_bin_count if self.kind.is_spectral else self.channel_count

    def header_line(self) -> str:
        """Render the header of the CSV file, including the line break."""
        return ",".join(self.column_names) + "\n"
