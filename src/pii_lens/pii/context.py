"""Context evaluation for ambiguous pattern hits.

Many catalog patterns (a bare 10-digit run, two capitalised words) are only
PII when the surrounding text says so. A hit that requires context is kept
when a category keyword appears in a symmetric window around its start, or
when it is the value of a `keyword: value` / `keyword=value` field.

Overrides:
- Aadhaar, Email, CreditCard never require context.
- Name does not when it opens the text or a sentence, or directly follows a
  salutation or label word ("Dear", "Contact", "Mr.").
- Mobile does not when it carries an international `+` prefix.
"""

from __future__ import annotations
import re
from typing import Iterable
from .base import PiiCategory
from .detectors.name import NAME_LEADERS
from .registry import get_detector

DEFAULT_WINDOW = 50
FIELD_LOOKBACK = 64

_SENTENCE_END_RE = re.compile(r"[.!?]\s+$")
_NAME_LEADER_RE = re.compile(r"\b(?:" + "|".join(NAME_LEADERS) + r")\.?[:,]?[ \t]+$", re.IGNORECASE)

def requires_context(category: PiiCategory) -> bool:
    return get_detector(category).requires_context

def has_context(text: str, match_start: int, keywords: Iterable[str], window: int = DEFAULT_WINDOW) -> bool:
    lo = max(0, match_start - window)
    hi = min(len(text), match_start + window)
    around = text[lo:hi].lower()
    keywords = [k.lower() for k in keywords if k]
    if any(k in around for k in keywords):
        return True
    # field shape: "Phone: 98..." / "acct=1234..." directly before the value
    before = text[max(0, match_start - FIELD_LOOKBACK):match_start]
    for k in keywords:
        if re.search(re.escape(k) + r"\s*[:=]\s*$", before, re.IGNORECASE):
            return True
    return False

def context_satisfied(
    category: PiiCategory,
    text: str,
    start: int,
    value: str,
    window: int = DEFAULT_WINDOW,
) -> bool:
    """Decide whether a hit of `category` at `start` may be kept."""
    if not requires_context(category):
        return True
    if category is PiiCategory.NAME:
        before = text[max(0, start - window):start]
        if start == 0 or _SENTENCE_END_RE.search(before) or _NAME_LEADER_RE.search(before):
            return True
    elif category is PiiCategory.MOBILE:
        if "+" in value:
            return True
    return has_context(text, start, get_detector(category).keywords, window)
