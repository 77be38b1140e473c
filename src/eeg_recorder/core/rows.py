"""Rows buffered by a recording session and how they are rendered."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

import numpy as np


@dataclass
class SessionMetadata:
    """Task information attached to every recorded row.

    It can be updated at any time. Rows keep the values that were current when they
    were appended.
    """

    difficulty: int = 0
    performance: int = 0
    operator_name: str = ""

    def snapshot(self) -> Tuple[int, int]:
        """Return the current difficulty and performance."""
        return self.difficulty, self.performance


def format_value(value: float) -> str:
    """Format a data value as the shortest decimal that round-trips to it."""
    return repr(float(value))


def _join(fields: Iterable[str]) -> str:
    return ",".join(fields) + "\n"


@dataclass(frozen=True)
class SampleRow:
    """One raw or filtered EEG sample."""

    timestamp_ms: int
    difficulty: int
    performance: int
    values: Tuple[float, ...]

    def render(self) -> str:
        """Render the row as a CSV line."""
        return _join(
            [str(self.timestamp_ms), str(self.difficulty), str(self.performance)]
            + [format_value(v) for v in self.values]
        )


@dataclass(frozen=True)
class PSDRow:
    """Power spectral density of a single channel."""

    timestamp_ms: int
    difficulty: int
    performance: int
    channel_index: int
    """1-based index of the channel the spectrum was computed for."""
    values: Tuple[float, ...]

    def render(self) -> str:
        """Render the row as a CSV line."""
        return _join(
            [
                str(self.timestamp_ms),
                str(self.difficulty),
                str(self.performance),
                str(self.channel_index),
            ]
            + [format_value(v) for v in self.values]
        )


def as_values(values) -> Tuple[float, ...]:
    """Convert a sequence or 1-D array of numbers into a tuple of floats.

    Raises:
        ValueError: If the values cannot be converted or are not one dimensional.
    """
    vector = np.array(values, dtype=float)
    if vector.ndim != 1:
        raise ValueError(
            f"Expected a 1-D sequence of values, got shape {vector.shape}"
        )
    return tuple(float(v) for v in vector)


@dataclass(frozen=True)
class SerializedOutput:
    """CSV text of a finished session and the name of the file to store it in."""

    text: str
    destination_name: str
