"""Functions commonly used by scripts."""
import logging
import os
from pathlib import Path
from typing import Union

from eeg_recorder.core.settings import LogLevel

logger = logging.getLogger(__name__)

RECORDER_HOME = os.path.join(os.path.expanduser("~"), ".eeg_recorder")


def configure_logger(script_name: str, log_level: LogLevel):
    """Set up the logger."""
    logging.basicConfig(
        format=f"%(levelname)s [{script_name}]: %(message)s", level=log_level.value
    )


def get_abs_path(
    abs_or_relative_path: Union[str, Path], relative_to: str = os.getcwd()
) -> str:
    """Return the absolute path for a resource.

    If an absolute path is passed as the first parameter then
    this is returned unchanged and the second parameter is ignored.
    If a relative path is passed as the first parameter then
    the second parameter is considered a sibling resource and
    the function returns an absolute path where the first parameter
    is relative to the path of the second parameter. Paths that do not
    exist there are resolved against `RECORDER_HOME`.

    Args:
        abs_or_relative_path: An absolute or relative path.
        relative_to: A file or directory absolute path.
          Defaults to current working directory.

    Returns:
        The absolute path of the first parameter.
    """
    if os.path.isabs(abs_or_relative_path):
        return str(abs_or_relative_path)

    parent_dir = relative_to
    if os.path.isfile(parent_dir):
        parent_dir = os.path.dirname(relative_to)

    full_path = os.path.join(parent_dir, abs_or_relative_path)
    if Path(full_path).exists():
        return full_path
    else:
        return os.path.join(RECORDER_HOME, abs_or_relative_path)


def get_configs_dir() -> str:
    """Get the path for the directory containing the configuration files."""
    return RECORDER_HOME


def get_recordings_dir() -> str:
    """Get the default path for the recorded session files."""
    return os.path.join(RECORDER_HOME, "recordings")
