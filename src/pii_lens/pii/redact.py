"""Rendering utilities.

We perform span-based rendering over the *original* text. Replacements are
applied in descending start order so offsets of matches not yet applied stay
valid even when a display value changes length.

- render: wrap each match in a `<span>` tag carrying category and confidence,
  showing either the raw or the masked value
- redact_text: substitute masked values with no markup
"""

from __future__ import annotations
from typing import Callable, List, Sequence
from .base import PiiMatch

HIGHLIGHT = "highlight"
MASKED = "masked"

def _apply(text: str, matches: Sequence[PiiMatch], display: Callable[[PiiMatch], str]) -> str:
    if not matches:
        return text
    # Sort spans descending so offsets don't shift
    ms = sorted(matches, key=lambda m: m.start, reverse=True)
    parts: List[str] = []
    cursor = len(text)
    for m in ms:
        if m.end > cursor or m.start < 0:
            # out of bounds, or overlapping a match already applied
            continue
        parts.append(text[m.end:cursor])
        parts.append(display(m))
        cursor = m.start
    parts.append(text[:cursor])
    return "".join(reversed(parts))

def tag(match: PiiMatch, masked: bool = False) -> str:
    mode = MASKED if masked else HIGHLIGHT
    value = match.masked_value if masked else match.raw_value
    return (
        f'<span class="pii-{mode} pii-{match.category.value}" '
        f'data-category="{match.category.value}" '
        f'data-confidence="{match.confidence:.2f}">{value}</span>'
    )

def render(text: str, matches: Sequence[PiiMatch], masked: bool = False) -> str:
    """Return `text` with every match wrapped in a category tag."""
    return _apply(text, matches, lambda m: tag(m, masked))

def redact_text(text: str, matches: Sequence[PiiMatch]) -> str:
    """Return `text` with every match replaced by its masked value."""
    return _apply(text, matches, lambda m: m.masked_value)

def line_breaks(rendered: str) -> str:
    return rendered.replace("\n", "<br>")
