"""Per-category summary of a match list."""

from __future__ import annotations
from typing import Dict, Iterable, List
from .base import DEFAULT_CONFIDENCE, PiiCategory, PiiMatch, PiiSummary

HIGH_RISK = frozenset({PiiCategory.AADHAAR, PiiCategory.CREDIT_CARD, PiiCategory.BANK_ACCOUNT})
MEDIUM_RISK = frozenset({PiiCategory.EMAIL, PiiCategory.MOBILE, PiiCategory.BIRTHDAY})

def severity(category: PiiCategory) -> str:
    if category in HIGH_RISK:
        return "high"
    if category in MEDIUM_RISK:
        return "medium"
    return "low"

def summarize(matches: Iterable[PiiMatch]) -> List[PiiSummary]:
    """One entry per category present, in order of first occurrence."""
    acc: Dict[PiiCategory, List[float]] = {}
    for m in matches:
        conf = m.confidence if m.confidence is not None else DEFAULT_CONFIDENCE
        acc.setdefault(m.category, []).append(conf)
    return [
        PiiSummary(
            category=cat,
            count=len(confs),
            average_confidence=sum(confs) / len(confs),
            severity=severity(cat),
        )
        for cat, confs in acc.items()
    ]

def total_count(summaries: Iterable[PiiSummary]) -> int:
    return sum(s.count for s in summaries)
