"""Configuration, mod list and launch-parameter handling for a DayZ launcher."""

__version__ = "0.1.0"