"""Sleep apnea STOP-BANG screening intake."""

__version__ = "0.1.0"
