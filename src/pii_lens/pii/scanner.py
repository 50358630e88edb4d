"""Candidate scanning.

`scan()` produces the unresolved candidate pool for one text:

1) obfuscation recovery (registered first)
2) every catalog pattern, in catalog order, skipping hits that
   - sit inside or right next to a URL (`scheme://...`)
   - fall entirely inside a recovered span
   - fail their category's context requirement

Candidates may overlap; `pii_lens.pii.resolve` finalizes them. Confidence is
left at the default sentinel.
"""

from __future__ import annotations
import re
from typing import Collection, List, Optional, Sequence
from .base import DEFAULT_CONFIDENCE, PiiCategory, PiiMatch, Span
from .context import DEFAULT_WINDOW, context_satisfied
from .mask import mask
from .obfuscation import recover_obfuscated
from .registry import iter_detectors

DEFAULT_URL_WINDOW = 10

_URL_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*://\S+")

def url_spans(text: str) -> List[Span]:
    return [Span(m.start(), m.end()) for m in _URL_RE.finditer(text)]

def near_url(text: str, start: int, end: int, urls: Sequence[Span], window: int = DEFAULT_URL_WINDOW) -> bool:
    hit = Span(start, end)
    if any(u.overlaps(hit) for u in urls):
        return True
    return "://" in text[max(0, start - window):min(len(text), end + window)]

def scan(
    text: str,
    *,
    context_window: int = DEFAULT_WINDOW,
    url_window: int = DEFAULT_URL_WINDOW,
    confidence: float = DEFAULT_CONFIDENCE,
    categories: Optional[Collection[PiiCategory]] = None,
) -> List[PiiMatch]:
    if not text or not text.strip():
        return []

    recovered = recover_obfuscated(text, confidence=confidence, categories=categories)
    covered = [m.span for m in recovered]
    urls = url_spans(text)
    candidates: List[PiiMatch] = list(recovered)

    for det in iter_detectors():
        if categories and det.category not in categories:
            continue
        for value, start, end in det.find(text):
            if near_url(text, start, end, urls, url_window):
                continue
            span = Span(start, end)
            if any(s.contains(span) for s in covered):
                continue
            if not context_satisfied(det.category, text, start, value, context_window):
                continue
            candidates.append(PiiMatch(
                category=det.category,
                raw_value=value,
                masked_value=mask(value, det.category),
                span=span,
                confidence=confidence,
            ))
    return candidates
