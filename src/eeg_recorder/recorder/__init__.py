"""A script to record EEG data from a file into a CSV session file."""
