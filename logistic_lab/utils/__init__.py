"""Logging and timing utilities."""
