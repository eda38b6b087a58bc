"""Shared constants for setclass."""
