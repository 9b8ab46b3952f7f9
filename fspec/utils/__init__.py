"""Utility modules for fspec."""
