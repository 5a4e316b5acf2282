"""Utility modules for Good Commit."""
