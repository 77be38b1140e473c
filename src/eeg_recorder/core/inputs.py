"""Load previously acquired EEG data to be recorded."""
import errno
import os

from numpy import ndarray
import numpy as np


def load_npz_array(filepath: str, array_name: str = "data") -> ndarray:
    """Load one array from a `.npz` file.

    Args:
        filepath: `.npz` file path.
        array_name: Name of the array defined when creating the file (see
          `np.savez` documentation for details). Samples are expected in the shape
          (N, C), N = number of samples and C = number of channels. Power spectra
          are expected in the shape (N, C, F), F = number of frequency bins.
          Defaults to "data".

    Returns:
        The loaded array.

    Raises:
        FileNotFoundError: If the file does not exist.
        KeyError: If the file does not contain the array.
    """
    if not os.path.exists(filepath):
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), filepath)
    file_data = np.load(filepath)
    if array_name not in file_data:
        raise KeyError(f"Array '{array_name}' not found in {filepath}")
    return np.asarray(file_data[array_name], dtype=float)
