"""Logging services: output stream."""

from services.output_stream import OutputStreamService

__all__ = [
    "OutputStreamService",
]
