"""Behave step definitions."""
