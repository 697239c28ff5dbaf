"""Exceptions raised by hilbertfrac"""


class HilbertFracError(ValueError):
    """Base class for every hilbertfrac input error"""


class InvalidDepth(HilbertFracError):
    """Recursion depth is negative or above the configured ceiling"""

    def __init__(self, depth, ceiling=None):
        self.depth = depth
        self.ceiling = ceiling
        if ceiling is None:
            message = f"Depth must be >= 0, got {depth}"
        else:
            message = f"Depth must be in range [0, {ceiling}], got {depth}"
        super().__init__(message)


class InvalidFraction(HilbertFracError):
    """Fraction is NaN, infinite, or outside [0, 1)"""

    def __init__(self, fraction):
        self.fraction = fraction
        super().__init__(f"Fraction {fraction!r} out of range [0, 1)")


class InvalidTable(HilbertFracError):
    """Grid is not a 2x2 arrangement of the labels 0..3"""


class InvalidLabel(HilbertFracError):
    """Quadrant label outside 0..3"""


class InvalidBit(HilbertFracError):
    """Mantissa bit that is not 0 or 1"""


class InvalidHighlight(InvalidDepth):
    """Highlighted square level outside 1..depth"""

    def __init__(self, level, ceiling):
        self.depth = level
        self.ceiling = ceiling
        HilbertFracError.__init__(
            self, f"Highlight must be in range [1, {ceiling}], got {level}"
        )
