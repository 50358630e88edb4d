"""PII data model and detector interface.

We separate:
- Detection: find candidate spans (category, span, raw value)
- Resolution: turn overlapping candidates into one non-overlapping list
- Presentation: mask, render and summarize a resolved list

Spans are half-open character offsets into the *original* text. A resolved
match list is sorted by start and pairwise non-overlapping.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, Tuple
import re

DEFAULT_CONFIDENCE = 0.8

class PiiCategory(str, Enum):
    NAME = "Name"
    MOBILE = "Mobile"
    EMAIL = "Email"
    AADHAAR = "Aadhaar"
    CREDIT_CARD = "CreditCard"
    BANK_ACCOUNT = "BankAccount"
    ADDRESS = "Address"
    BIRTHDAY = "Birthday"
    PASSPORT = "Passport"
    DRIVERS_LICENSE = "DriversLicense"

    @classmethod
    def parse(cls, name: str) -> "PiiCategory":
        """Look up a category by value or member name, ignoring case, `_` and spaces."""
        key = re.sub(r"[\s_-]+", "", str(name)).lower()
        for c in cls:
            if key in (c.value.lower(), c.name.replace("_", "").lower()):
                return c
        raise ValueError(f"Unknown PII category: {name!r}. Available: {[c.value for c in cls]}")

@dataclass(frozen=True)
class Span:
    start: int
    end: int

    def __post_init__(self):
        if self.start < 0 or self.end <= self.start:
            raise ValueError(f"Invalid span [{self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start

    def contains(self, other: "Span") -> bool:
        return self.start <= other.start and self.end >= other.end

    def overlaps(self, other: "Span") -> bool:
        return self.start < other.end and other.start < self.end

@dataclass(frozen=True)
class PiiMatch:
    category: PiiCategory
    raw_value: str            # literal text[start:end] (obfuscated form for recovered matches)
    masked_value: str
    span: Span
    confidence: float = DEFAULT_CONFIDENCE
    source: str = "pattern"   # pattern | recovered | supplemental

    @property
    def start(self) -> int:
        return self.span.start

    @property
    def end(self) -> int:
        return self.span.end

    def to_dict(self, include_raw: bool = True) -> Dict[str, Any]:
        d = {
            "category": self.category.value,
            "masked_value": self.masked_value,
            "start": self.span.start,
            "end": self.span.end,
            "confidence": self.confidence,
            "source": self.source,
        }
        if include_raw:
            d["raw_value"] = self.raw_value
        return d

@dataclass(frozen=True)
class PiiSummary:
    category: PiiCategory
    count: int
    average_confidence: float
    severity: str = "low"     # high | medium | low

class PiiDetector:
    """One catalog entry: a literal pattern plus its context keywords."""
    category: PiiCategory
    pattern: re.Pattern
    keywords: Tuple[str, ...] = ()
    requires_context: bool = True

    @property
    def name(self) -> str:
        return self.category.value

    def find(self, text: str) -> Iterator[Tuple[str, int, int]]:
        """Yield (value, start, end) for every non-overlapping pattern hit.

        The value is the first non-empty capture group, falling back to the
        whole match; the offsets follow whichever was chosen.
        """
        for m in self.pattern.finditer(text):
            idx = 0
            for g in range(1, m.re.groups + 1):
                if m.group(g):
                    idx = g
                    break
            start, end = m.span(idx)
            if end > start:
                yield m.group(idx), start, end

