"""Composite lab workflows over a single sample."""
