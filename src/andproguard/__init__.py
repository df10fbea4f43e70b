"""AndProguard rule settings: naming rules, their editor and persistence."""

__version__ = "0.1.0"
