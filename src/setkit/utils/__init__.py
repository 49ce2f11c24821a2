"""Common utility functions for setkit."""

from setkit.utils.timestamps import get_iso_timestamp

__all__ = ["get_iso_timestamp"]
