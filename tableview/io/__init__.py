"""
pandas interop: build records from DataFrames and export rendered pages.
"""

from .frames import records_from_frame, rendered_frame

__all__ = ["records_from_frame", "rendered_frame"]
