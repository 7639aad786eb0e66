"""Utility functions and types."""
