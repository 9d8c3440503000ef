"""Common utility functions for bengalidate."""

from bengalidate.utils.timestamps import get_iso_timestamp

__all__ = ["get_iso_timestamp"]
