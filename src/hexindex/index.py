"""
Packed 64-bit cell index.

Bit layout, most significant first:
    1 bit   reserved, 0
    4 bits  mode (1 = cell)
    3 bits  reserved, 0
    4 bits  resolution 0-15
    7 bits  base cell 0-121
    15 x 3  digits for resolutions 1-15; levels finer than the resolution hold 7
"""
import re
from dataclasses import dataclass
from typing import Iterable, Tuple

from .basecells import NUM_BASE_CELLS
from .coords import Direction, rotate_digit_ccw, rotate_digit_cw
from .errors import IndexFormatError

MAX_RESOLUTION = 15
CELL_MODE = 1

MODE_OFFSET = 59
MODE_MASK = 0b1111 << MODE_OFFSET
RESERVED_OFFSET = 56
RESERVED_MASK = 0b111 << RESERVED_OFFSET
RES_OFFSET = 52
RES_MASK = 0b1111 << RES_OFFSET
BASE_CELL_OFFSET = 45
BASE_CELL_MASK = 0b1111111 << BASE_CELL_OFFSET
PER_DIGIT_OFFSET = 3
DIGIT_MASK = 0b111

# Mode 0, resolution 0, base cell 0, every digit set to 7
H3_INIT = 35184372088831

_HEX_RE = re.compile(r"[0-9a-fA-F]{1,16}")


def _digit_offset(res: int) -> int:
    return (MAX_RESOLUTION - res) * PER_DIGIT_OFFSET


@dataclass(frozen=True)
class CellIndex:
    """Immutable packed cell index. Every with_* method returns a new index."""
    value: int

    @property
    def mode(self) -> int:
        return (self.value & MODE_MASK) >> MODE_OFFSET

    @property
    def reserved(self) -> int:
        return (self.value & RESERVED_MASK) >> RESERVED_OFFSET

    @property
    def resolution(self) -> int:
        return (self.value & RES_MASK) >> RES_OFFSET

    @property
    def base_cell(self) -> int:
        return (self.value & BASE_CELL_MASK) >> BASE_CELL_OFFSET

    def digit(self, res: int) -> int:
        """Digit at resolution res, 1-15."""
        return (self.value >> _digit_offset(res)) & DIGIT_MASK

    def digits(self) -> Tuple[int, ...]:
        """Digits for resolutions 1 through self.resolution."""
        return tuple(self.digit(r) for r in range(1, self.resolution + 1))

    def with_mode(self, mode: int) -> "CellIndex":
        return CellIndex((self.value & ~MODE_MASK) | (mode << MODE_OFFSET))

    def with_resolution(self, res: int) -> "CellIndex":
        return CellIndex((self.value & ~RES_MASK) | (res << RES_OFFSET))

    def with_base_cell(self, base_cell: int) -> "CellIndex":
        return CellIndex((self.value & ~BASE_CELL_MASK) | (base_cell << BASE_CELL_OFFSET))

    def with_digit(self, res: int, digit: int) -> "CellIndex":
        offset = _digit_offset(res)
        return CellIndex((self.value & ~(DIGIT_MASK << offset)) | (int(digit) << offset))

    @classmethod
    def pack(cls, resolution: int, base_cell: int, digits: Iterable[int]) -> "CellIndex":
        """
        Build a mode 1 index.

        Args:
            resolution: 0-15
            base_cell: 0-121
            digits: One digit per resolution 1..resolution; finer levels get 7
        """
        cell = cls(H3_INIT).with_mode(CELL_MODE).with_resolution(resolution).with_base_cell(base_cell)
        for r, digit in enumerate(digits, start=1):
            cell = cell.with_digit(r, digit)
        return cell

    def unpack(self) -> Tuple[int, int, Tuple[int, ...]]:
        """Inverse of pack: (resolution, base cell, digits)."""
        return self.resolution, self.base_cell, self.digits()

    def to_hex(self) -> str:
        """Lowercase hexadecimal without leading zeros."""
        return format(self.value, "x")

    @classmethod
    def from_hex(cls, text: str) -> "CellIndex":
        """
        Parse a hexadecimal cell id.

        Raises:
            IndexFormatError: If text is not a 1-16 digit hex string, or its
                base cell field is 122 or more
        """
        if not isinstance(text, str):
            raise IndexFormatError(f"Cell id must be a string, got {type(text).__name__}")
        if not text:
            raise IndexFormatError("Cell id must not be empty")
        if len(text) > 16:
            raise IndexFormatError(f"Cell id '{text}' is longer than 16 hex characters")
        if not _HEX_RE.fullmatch(text):
            raise IndexFormatError(f"Cell id '{text}' is not hexadecimal")

        cell = cls(int(text, 16))
        if cell.base_cell >= NUM_BASE_CELLS:
            raise IndexFormatError(
                f"Cell id '{text}' has base cell {cell.base_cell}, must be below {NUM_BASE_CELLS}"
            )
        return cell

    def __str__(self) -> str:
        return self.to_hex()


def leading_non_zero_digit(cell: CellIndex) -> int:
    """First non-CENTER digit from resolution 1 down, or CENTER if there is none."""
    for r in range(1, cell.resolution + 1):
        digit = cell.digit(r)
        if digit:
            return digit
    return Direction.CENTER


def rotate60ccw(cell: CellIndex) -> CellIndex:
    for r in range(1, cell.resolution + 1):
        cell = cell.with_digit(r, rotate_digit_ccw(cell.digit(r)))
    return cell


def rotate60cw(cell: CellIndex) -> CellIndex:
    for r in range(1, cell.resolution + 1):
        cell = cell.with_digit(r, rotate_digit_cw(cell.digit(r)))
    return cell


def rotate_pent60ccw(cell: CellIndex) -> CellIndex:
    """
    Rotate a pentagon cell 60 degrees counter-clockwise.

    The K subsequence is missing from pentagons, so whenever the leading
    digit rotates onto K_AXES the whole index is rotated once more.
    """
    found_first_non_zero = False
    for r in range(1, cell.resolution + 1):
        cell = cell.with_digit(r, rotate_digit_ccw(cell.digit(r)))
        if not found_first_non_zero and cell.digit(r) != Direction.CENTER:
            found_first_non_zero = True
            if leading_non_zero_digit(cell) == Direction.K_AXES:
                cell = rotate60ccw(cell)
    return cell
