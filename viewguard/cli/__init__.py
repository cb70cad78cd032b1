"""Viewguard CLI — Typer-based command-line interface.

Provides the ``viewguard`` command with one subcommand per demonstration.
All output uses Rich.
"""
