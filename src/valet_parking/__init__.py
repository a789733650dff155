"""Valet parking facility: slot allocation, vehicle sessions and fees."""

__version__ = "1.0.0"
