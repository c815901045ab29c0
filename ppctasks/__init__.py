"""Staged computational tasks, timing helpers, reference reductions and worked parallel examples."""

__version__ = "0.1.0"