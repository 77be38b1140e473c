"""Recording session that buffers EEG data and serializes it to CSV text.

A :class:`SessionRecorder` starts :attr:`SessionState.IDLE`. Opening a session binds
a :class:`eeg_recorder.core.schema.RowSchema` and starts recording. While recording,
samples or power spectra are appended to an in-memory buffer, each row stamped with
the wall-clock time and the task metadata current at append time. Finalizing the
session renders the header and the rows, returns them as a
:class:`eeg_recorder.core.rows.SerializedOutput` and goes back to idle.

The recorder performs no I/O and no locking. Share it between threads only behind
an external lock.
"""
from enum import Enum
import logging
import time
from typing import Callable, List, Optional, Sequence, Tuple, Union

from eeg_recorder.core.outputs import LoggingNotifier
from eeg_recorder.core.outputs import Notifier
from eeg_recorder.core.rows import as_values
from eeg_recorder.core.rows import PSDRow
from eeg_recorder.core.rows import SampleRow
from eeg_recorder.core.rows import SerializedOutput
from eeg_recorder.core.rows import SessionMetadata
from eeg_recorder.core.schema import DataKind
from eeg_recorder.core.schema import RowSchema
from eeg_recorder.errors import AlreadyRecording
from eeg_recorder.errors import NotRecording
from eeg_recorder.errors import SchemaMismatch

logger = logging.getLogger(__name__)

Row = Union[SampleRow, PSDRow]


class SessionState(str, Enum):
    """Possible states of a recording session."""

    IDLE = "idle"
    RECORDING = "recording"


def current_time_ms() -> int:
    """Return the wall-clock time in milliseconds since the epoch."""
    return int(time.time() * 1000)


def make_destination_name(
    operator_name: str, kind: DataKind, file_sequence_number: int
) -> str:
    """Name of the file a session is saved to."""
    return f"{operator_name}{kind.title}{file_sequence_number}.csv"


class SessionRecorder:
    """Buffers the rows of one recording session at a time."""

    def __init__(
        self,
        notifier: Optional[Notifier] = None,
        clock: Optional[Callable[[], int]] = None,
    ):
        """Initialize the SessionRecorder class.

        Args:
            notifier: Receives an event when a session starts recording.
              Defaults to a :class:`eeg_recorder.core.outputs.LoggingNotifier`.
            clock: Function returning the current time in milliseconds since the
              epoch. Defaults to :func:`current_time_ms`.
        """
        self.notifier = notifier if notifier is not None else LoggingNotifier()
        self._clock = clock if clock is not None else current_time_ms
        self.metadata = SessionMetadata()
        self.file_sequence_number = 1
        self._state = SessionState.IDLE
        self._schema: Optional[RowSchema] = None
        self._rows: List[Row] = []

    def __len__(self) -> int:
        """Return the number of buffered rows."""
        return len(self._rows)

    @property
    def state(self) -> SessionState:
        """Current state of the session."""
        return self._state

    @property
    def is_recording(self) -> bool:
        """Whether a session is currently recording."""
        return self._state == SessionState.RECORDING

    @property
    def schema(self) -> Optional[RowSchema]:
        """Schema bound to the recording session, or None when idle."""
        return self._schema

    @property
    def rows(self) -> Tuple[Row, ...]:
        """Rows buffered so far, in append order."""
        return tuple(self._rows)

    @property
    def destination_name(self) -> str:
        """Name of the file the recording session will be saved to.

        Raises:
            NotRecording: If no session is recording.
        """
        schema = self._require_recording("name the destination file")
        return make_destination_name(
            self.metadata.operator_name, schema.kind, self.file_sequence_number
        )

    def open(
        self,
        kind: DataKind,
        freq_bin_count: int = 0,
        file_sequence_number: int = 1,
    ) -> None:
        """Start recording a new session.

        Args:
            kind: Type of data that will be recorded.
            freq_bin_count: Number of frequency bins of each spectrum. Required for
              :attr:`eeg_recorder.core.schema.DataKind.DENOISED_PSD` sessions.
            file_sequence_number: Number appended to the destination file name.

        Raises:
            AlreadyRecording: If a session is already recording. Its buffer is
              left untouched.
            InvalidSchema: If the schema cannot be built from the parameters.
        """
        if self.is_recording:
            raise AlreadyRecording(self.destination_name)
        schema = RowSchema.build(kind, freq_bin_count=freq_bin_count)

        self.notifier.recording_started(
            make_destination_name(
                self.metadata.operator_name, schema.kind, file_sequence_number
            )
        )
        self._schema = schema
        self._rows = []
        self.file_sequence_number = file_sequence_number
        self._state = SessionState.RECORDING

    def append_sample(self, channel_values: Sequence[float]) -> None:
        """Append one raw or filtered EEG sample.

        Args:
            channel_values: One value per channel.

        Raises:
            NotRecording: If no session is recording.
            SchemaMismatch: If the session records power spectra or the number of
              values is different from the channel count.
        """
        schema = self._require_recording("append a sample")
        if schema.kind.is_spectral:
            raise SchemaMismatch(
                f"Cannot append a sample to a {schema.kind.title} session"
            )
        values = self._to_values(channel_values, schema.n_values, "channels")

        difficulty, performance = self.metadata.snapshot()
        self._rows.append(SampleRow(self._clock(), difficulty, performance, values))

    def append_psd(self, channel_bin_values: Sequence[Sequence[float]]) -> None:
        """Append the power spectral density of every channel.

        One row is appended per channel. Each row gets its own timestamp.

        Args:
            channel_bin_values: One spectrum per channel, each with one value per
              frequency bin.

        Raises:
            NotRecording: If no session is recording.
            SchemaMismatch: If the session records samples or a spectrum does not
              have the expected number of frequency bins. No row is appended.
        """
        schema = self._require_recording("append a power spectrum")
        if not schema.kind.is_spectral:
            raise SchemaMismatch(
                f"Cannot append a power spectrum to a {schema.kind.title} session"
            )
        try:
            channels = list(channel_bin_values)
        except TypeError as error:
            raise SchemaMismatch(
                f"Expected one spectrum per channel, received {channel_bin_values!r}"
            ) from error
        spectra = [
            self._to_values(bins, schema.n_values, "frequency bins")
            for bins in channels
        ]

        for channel_index, values in enumerate(spectra, start=1):
            difficulty, performance = self.metadata.snapshot()
            self._rows.append(
                PSDRow(self._clock(), difficulty, performance, channel_index, values)
            )

    def update_metadata(self, difficulty: int, performance: int) -> None:
        """Set the task difficulty and performance recorded with the next rows."""
        self.metadata.difficulty = difficulty
        self.metadata.performance = performance

    def update_operator_name(self, name: str) -> None:
        """Set the operator name used as prefix of the destination file name."""
        self.metadata.operator_name = name

    def finalize(self) -> SerializedOutput:
        """Stop recording and render the buffered rows.

        Returns:
            The CSV text of the session and the name of the file to save it to.

        Raises:
            NotRecording: If no session is recording.
        """
        schema = self._require_recording("finalize the session")
        output = SerializedOutput(
            text=schema.header_line() + "".join(row.render() for row in self._rows),
            destination_name=self.destination_name,
        )
        logger.info(f"Finalized {output.destination_name} with {len(self)} rows")

        self._state = SessionState.IDLE
        self._rows = []
        self._schema = None
        return output

    def abort(self) -> None:
        """Stop recording and discard the buffered rows.

        Raises:
            NotRecording: If no session is recording.
        """
        self._require_recording("abort the session")
        logger.warning(
            f"Discarding {len(self)} rows recorded for {self.destination_name}"
        )
        self._state = SessionState.IDLE
        self._rows = []
        self._schema = None

    def _require_recording(self, operation: str) -> RowSchema:
        if not self.is_recording or self._schema is None:
            raise NotRecording(operation)
        return self._schema

    @staticmethod
    def _to_values(values, expected: int, unit: str) -> Tuple[float, ...]:
        try:
            converted = as_values(values)
        except (TypeError, ValueError) as error:
            raise SchemaMismatch(str(error)) from error
        if len(converted) != expected:
            raise SchemaMismatch(
                f"Expected {expected} {unit}, received {len(converted)}"
            )
        return converted
