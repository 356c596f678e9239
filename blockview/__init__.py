"""Blockview - typed, queryable view of lsblk snapshots."""

__version__ = "0.1.0"
