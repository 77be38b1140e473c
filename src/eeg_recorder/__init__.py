"""EEG recorder main package.

The EEG recorder buffers EEG samples or power spectral densities in memory while a
recording session is running, and serializes the session to CSV text when it ends.
Every row is stamped with the time it was recorded and with the task difficulty and
performance at that moment.

The structure of this package is as follows:
 - :mod:`eeg_recorder.core.schema` contains the
   :class:`eeg_recorder.core.schema.RowSchema` class, which defines the columns of
   the recorded file for each :class:`eeg_recorder.core.schema.DataKind`.
 - :mod:`eeg_recorder.core.rows` contains the rows buffered by a session and how
   they are rendered to CSV.
 - :mod:`eeg_recorder.core.session` hosts the
   :class:`eeg_recorder.core.session.SessionRecorder` class, which owns the
   recording session lifecycle.
 - :mod:`eeg_recorder.core.outputs` contains the classes that are notified when
   recording starts, store finished sessions and export them.
 - :mod:`eeg_recorder.core.inputs` loads previously acquired data.
 - :mod:`eeg_recorder.core.settings` contains the data model used to parse and
   validate the config.
 - :mod:`eeg_recorder.errors` contains the errors raised by a session.

In addition, eeg_recorder hosts the following subpackages:
 - :mod:`eeg_recorder.util` contains utility functions that are used by scripts.
 - :mod:`eeg_recorder.recorder` and :mod:`eeg_recorder.scripts` host the entry
   points for the scripts that are exposed to the user.
"""
