"""Roster command-line interface."""
