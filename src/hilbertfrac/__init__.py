"""Hilbert-order quadrant resolution of binary fractions"""

from .adapter import LevelFlags, RenderingAdapter
from .config import Settings, get_settings
from .errors import (
    HilbertFracError,
    InvalidDepth,
    InvalidFraction,
    InvalidBit,
    InvalidHighlight,
    InvalidLabel,
    InvalidTable,
)
from .fraction import bits_from_string, bits_to_fraction, fraction_to_bits, pad_bits
from .quadrants import FIXED_TABLE, ROOT_TABLE, QuadrantTable
from .resolver import (
    Selection,
    SelectionPath,
    Square,
    iter_squares,
    locate,
    resolve,
    tables_along,
)
from .rotation import transform

__version__ = "0.1.0"
