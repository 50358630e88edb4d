"""Obfuscation recovery.

Runs before the pattern pass and finds PII that was deliberately disguised:

- word-separated emails: `name at example dot com`, `name [at] example (dot) com`
- spaced-out digit runs: `4 1 1 1  1 1 1 1 ...`, `4111 1111 1111 1111`; groups of
  at most six digits, never after a `+` (that is a phone number)

Recovered matches keep the *obfuscated* literal as `raw_value` (so the span
stays exact) and are masked from the normalized form. The pattern pass later
skips any hit that falls inside a recovered span.
"""

from __future__ import annotations
import re
from typing import Collection, List, Optional
from .base import DEFAULT_CONFIDENCE, PiiCategory, PiiMatch, Span
from .mask import OBFUSCATED_EMAIL_MASK, mask

_OPEN = r"(?:\s+|\s*[\[\(\{]\s*)"
_CLOSE = r"(?:\s+|\s*[\]\)\}]\s*)"

_LABEL = r"[A-Za-z0-9-]+"

# local at domain (dot label)+
WORD_EMAIL_RE = re.compile(
    r"(?<![\w.%+-])[A-Za-z0-9._%+-]+"
    + _OPEN + r"at" + _CLOSE + _LABEL
    + r"(?:" + _OPEN + r"dot" + _CLOSE + _LABEL + r")+\b",
    re.IGNORECASE,
)
# last label must look like a top-level domain
_TLD_RE = re.compile(r"(?:[a-z]{2}|com|org|net|edu|gov|mil|int|info|biz|io|ai|app|dev|tech|online|xyz)", re.IGNORECASE)
_SEPARATOR_RE = re.compile(_OPEN + r"(at|dot)" + _CLOSE, re.IGNORECASE)

# 8+ digits with whitespace between at least some of them; never after "+"
SPACED_DIGITS_RE = re.compile(r"(?<![\w+])\d(?:[ \t]*\d){7,}(?![\w])")
# longest digit group a deliberately spaced number is written with (4-4-4-4, 5-5, 4-6-5)
MAX_DIGIT_GROUP = 6

def normalize_word_email(literal: str) -> str:
    """`name at example dot com` -> `name@example.com`."""
    return _SEPARATOR_RE.sub(lambda m: "@" if m.group(1).lower() == "at" else ".", literal)

def classify_digit_run(digits: str) -> Optional[PiiCategory]:
    if 13 <= len(digits) <= 19:
        return PiiCategory.CREDIT_CARD
    if len(digits) == 12 and digits[0] in "23456789":
        return PiiCategory.AADHAAR
    return None

def recover_obfuscated(
    text: str,
    *,
    confidence: float = DEFAULT_CONFIDENCE,
    categories: Optional[Collection[PiiCategory]] = None,
) -> List[PiiMatch]:
    """Return recovered matches in text order (emails first, then digit runs)."""
    out: List[PiiMatch] = []

    if not categories or PiiCategory.EMAIL in categories:
        for m in WORD_EMAIL_RE.finditer(text):
            normalized = normalize_word_email(m.group(0))
            if "@" not in normalized or "." not in normalized:
                continue
            if not _TLD_RE.fullmatch(normalized.rsplit(".", 1)[-1]):
                continue
            out.append(PiiMatch(
                category=PiiCategory.EMAIL,
                raw_value=m.group(0),
                masked_value=OBFUSCATED_EMAIL_MASK,
                span=Span(m.start(), m.end()),
                confidence=confidence,
                source="recovered",
            ))

    for m in SPACED_DIGITS_RE.finditer(text):
        literal = m.group(0)
        groups = literal.split()
        if len(groups) < 2 or max(len(g) for g in groups) > MAX_DIGIT_GROUP:
            continue
        category = classify_digit_run(re.sub(r"\s+", "", literal))
        if category is None or (categories and category not in categories):
            continue
        out.append(PiiMatch(
            category=category,
            raw_value=literal,
            masked_value=mask(literal, category),
            span=Span(m.start(), m.end()),
            confidence=confidence,
            source="recovered",
        ))
    return out
