"""
Error taxonomy for the hexagonal cell index.

Range and format errors are raised before any geometry runs and are always
surfaced to the caller. InternalError marks a broken invariant inside the
lattice math and is never expected for validated input.
"""
from typing import Any


class HexIndexError(Exception):
    """Base class for all errors raised by hexindex."""


class InputRangeError(HexIndexError, ValueError):
    """Latitude, longitude or resolution outside its valid range."""

    def __init__(self, field: str, value: Any, message: str):
        super().__init__(message)
        self.field = field
        self.value = value


class IndexFormatError(HexIndexError, ValueError):
    """Malformed cell index string or structurally invalid packed index."""


class NeighborsNotSupportedError(HexIndexError, NotImplementedError):
    """Neighbor enumeration across the lattice is not provided."""


class InternalError(HexIndexError, RuntimeError):
    """A lattice invariant was violated (out-of-table face, non-unit digit)."""
