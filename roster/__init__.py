"""Roster - in-memory employee roster with search, sort and pay reports."""

__version__ = "0.3.0"
