"""Plugin package exposing attach functions for each tool module.

Each module defines an ``attach(app)`` function which registers
tool functions on the FastMCP app instance.
"""
from . import net

__all__ = ["net"]
