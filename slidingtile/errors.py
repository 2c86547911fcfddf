from __future__ import annotations


class SlidingTileError(Exception):
    """Base class for errors raised by slidingtile."""


class MalformedBoard(SlidingTileError, ValueError):
    """Grid is not square, lacks the blank, or has duplicate/out-of-range tiles."""


class InvariantViolation(SlidingTileError, RuntimeError):
    """An operation was asked of a board that cannot support it (e.g. twin() with N < 2)."""
