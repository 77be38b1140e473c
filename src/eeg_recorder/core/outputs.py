"""Collaborators that receive the data produced by a recording session.

A :class:`eeg_recorder.core.session.SessionRecorder` performs no I/O. It tells a
:class:`Notifier` when recording starts and hands its
:class:`eeg_recorder.core.rows.SerializedOutput` to the caller, who can persist it
with a :class:`SessionOutput` and offer the stored file with an :class:`Exporter`.
Errors raised by these collaborators are propagated to the caller.
"""
import abc
import logging
from pathlib import Path
import shutil
from typing import Union

from eeg_recorder.core.rows import SerializedOutput


class Notifier(abc.ABC):
    """Receives the events emitted by a recording session."""

    @abc.abstractmethod
    def recording_started(self, destination_name: str) -> None:
        """Notify that a session started recording.

        Args:
            destination_name: Name of the file the data will be saved to.
        """
        pass


class LoggingNotifier(Notifier):
    """Notifier that reports the events in the log."""

    def __init__(self):
        """Initialize the LoggingNotifier class."""
        self.logger = logging.getLogger(__name__)

    def recording_started(self, destination_name: str) -> None:
        """Log that a session started recording."""
        self.logger.info(f"Recording data in {destination_name}")


class SessionOutput(abc.ABC):
    """Represents an abstract output that can store a finished session."""

    @abc.abstractmethod
    def save(self, output: SerializedOutput) -> Path:
        """Store the serialized session.

        Args:
            output: The text and the file name produced by the session.

        Returns:
            The location of the stored data.
        """
        pass


class ConsoleOutput(SessionOutput):
    """Represents an output that prints the session to the terminal."""

    def save(self, output: SerializedOutput) -> Path:
        """Print the session text and return its file name."""
        print(output.text, end="")
        return Path(output.destination_name)


class FileOutput(SessionOutput):
    """Represents an output that writes the session to a file."""

    def __init__(self, directory: Union[str, Path]):
        """Initialize FileOutput class.

        Args:
            directory: Directory where the session files are written. It is
              created if it does not exist.
        """
        self.logger = logging.getLogger(__name__)
        self.directory = Path(directory)

    def save(self, output: SerializedOutput) -> Path:
        """Write the session text to `directory/destination_name`.

        Raises:
            OSError: If the directory cannot be created or the file written.
        """
        self.directory.mkdir(parents=True, exist_ok=True)
        file_path = self.directory / output.destination_name
        self.logger.info(f"Writing output file {file_path}")
        with open(file_path, "w", newline="") as f:
            f.write(output.text)
        return file_path


class Exporter(abc.ABC):
    """Offers a stored session file to another application."""

    @abc.abstractmethod
    def export(self, file_path: Path) -> Path:
        """Export the file.

        Args:
            file_path: Location of the stored session.

        Returns:
            The location the file was exported to.
        """
        pass


class CopyExporter(Exporter):
    """Exporter that copies the session file into a shared directory."""

    def __init__(self, directory: Union[str, Path]):
        """Initialize the CopyExporter class.

        Args:
            directory: Directory the files are copied to.
        """
        self.logger = logging.getLogger(__name__)
        self.directory = Path(directory)

    def export(self, file_path: Path) -> Path:
        """Copy the file into the export directory.

        Raises:
            OSError: If the file cannot be copied.
        """
        self.directory.mkdir(parents=True, exist_ok=True)
        exported_path = Path(shutil.copy(file_path, self.directory))
        self.logger.info(f"Exported data to {exported_path}")
        return exported_path
