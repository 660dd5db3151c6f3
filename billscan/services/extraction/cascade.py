"""
Ordered "first match wins" evaluation shared by the amount and date extractors.

A cascade is a sequence of steps. Each step takes the text and returns the
extracted string or None; the first non-None result is the answer.
"""

import re
from typing import Callable, Iterable, Optional, Sequence

Step = Callable[[str], Optional[str]]


def first_match(steps: Iterable[Step], text: str) -> Optional[str]:
    """
    Run steps in order and return the first non-None result.

    Args:
        steps: Ordered extraction steps
        text: Text handed to every step

    Returns:
        The first result found, or None when every step misses
    """
    for step in steps:
        result = step(text)
        if result is not None:
            return result
    return None


def pattern_step(patterns: Sequence[re.Pattern], group: int = 1) -> Step:
    """Build a step trying each compiled pattern in order and returning its capture group."""
    def _step(text: str) -> Optional[str]:
        for pattern in patterns:
            match = pattern.search(text)
            if match:
                return match.group(group).strip()
        return None
    return _step


def within(region: Callable[[str], str], step: Step) -> Step:
    """Restrict a step to a region (slice) of the text."""
    def _step(text: str) -> Optional[str]:
        return step(region(text))
    return _step


def per_line(lines: Callable[[str], list[str]], step: Step) -> Step:
    """Apply a step to each selected line individually, first hit wins."""
    def _step(text: str) -> Optional[str]:
        for line in lines(text):
            result = step(line)
            if result is not None:
                return result
        return None
    return _step


def non_empty_lines(text: str) -> list[str]:
    return [line.strip() for line in text.split("\n") if line.strip()]


def head(fraction: float) -> Callable[[str], str]:
    """Region selector for the leading fraction of the text."""
    return lambda text: text[: int(len(text) * fraction)]


def tail(fraction: float) -> Callable[[str], str]:
    """Region selector for the trailing fraction of the text."""
    return lambda text: text[int(len(text) * (1 - fraction)):]
