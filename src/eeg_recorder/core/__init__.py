"""EEG recorder core package.

It hosts the recording session state machine, the row schema and the
collaborators that persist the recorded data.
"""
