"""Stylesheet constants for the AndProguard GUI."""
