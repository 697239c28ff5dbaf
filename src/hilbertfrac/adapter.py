"""
Bridge between a renderer and the resolver.

The renderer hands over a fraction and a depth and gets back the
selection path. It also owns a single highlighted level; the adapter
keeps it and reports per-level highlight flags for drawing.
"""

from functools import lru_cache
from typing import List, NamedTuple, Optional, Tuple

from .config import Settings, get_settings
from .errors import InvalidDepth, InvalidFraction, InvalidHighlight
from .fraction import fraction_to_bits, validate_fraction
from .log import get_logger
from .resolver import Selection, SelectionPath, is_integral, resolve

logger = get_logger(__name__)


class LevelFlags(NamedTuple):
    """Highlight state of the square drawn for one selection"""
    level: int
    is_highlighted: bool
    is_highlighted_ancestor: bool


class RenderingAdapter:
    """
    Resolution requests plus highlight state for one view.

    Square levels are 1-based: the selection at path level L is drawn
    as a square at level L + 1, and the highlight names one of those.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._highlight: Optional[int] = None
        # Resolution is a pure function of (fraction, depth)
        self._resolve_cached = lru_cache(maxsize=self.settings.cache_size)(self._resolve)

    def _resolve(self, fraction: float, depth: int) -> Tuple[Selection, ...]:
        logger.debug("resolving %r to depth %d", fraction, depth)
        bits = fraction_to_bits(fraction, self.settings.precision)
        return tuple(resolve(bits, depth, rotate=self.settings.rotate))

    def request_resolution(self, fraction: float, depth: int) -> SelectionPath:
        """
        Resolve ``fraction`` to ``depth`` levels.

        Args:
            fraction: Value in [0, 1)
            depth: Levels to resolve, 0..settings.max_depth

        Returns:
            Selection path of length ``depth``

        Raises:
            InvalidFraction: If fraction is NaN, infinite or outside [0, 1)
            InvalidDepth: If depth is negative or above the ceiling
        """
        try:
            value = validate_fraction(fraction)
        except InvalidFraction:
            logger.debug("rejected fraction %r", fraction)
            raise
        self.check_depth(depth)
        return list(self._resolve_cached(value, int(depth)))

    def check_depth(self, depth) -> None:
        """Raise InvalidDepth unless 0 <= depth <= settings.max_depth"""
        ceiling = self.settings.max_depth
        if not is_integral(depth) or not 0 <= depth <= ceiling:
            logger.debug("rejected depth %r (ceiling %d)", depth, ceiling)
            raise InvalidDepth(depth, ceiling)

    @property
    def highlight(self) -> Optional[int]:
        return self._highlight

    def set_highlight(self, level: Optional[int]) -> None:
        """Highlight square ``level`` (1..max_depth), or clear with None"""
        if level is not None:
            if not is_integral(level) or not 1 <= level <= self.settings.max_depth:
                raise InvalidHighlight(level, self.settings.max_depth)
            level = int(level)
        logger.debug("highlight %r -> %r", self._highlight, level)
        self._highlight = level

    def clear_highlight(self) -> None:
        self.set_highlight(None)

    def level_flags(self, path: SelectionPath) -> List[LevelFlags]:
        """
        Per-selection highlight flags for ``path``.

        Raises:
            InvalidHighlight: If the highlighted level is deeper than ``path``
        """
        if self._highlight is not None and self._highlight > len(path):
            raise InvalidHighlight(self._highlight, len(path))
        flags = []
        for selection in path:
            square_level = selection.level + 1
            flags.append(LevelFlags(
                level=square_level,
                is_highlighted=self._highlight == square_level,
                is_highlighted_ancestor=self._highlight == square_level + 1,
            ))
        return flags

    def cache_info(self):
        return self._resolve_cached.cache_info()
