"""Toolkit scanning and catalog lookup."""
