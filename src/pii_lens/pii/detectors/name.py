from __future__ import annotations
import re
from typing import Iterator, Tuple
from ..base import PiiCategory, PiiDetector

# Two to four capitalised words on one line, e.g. "Priya Sharma"
NAME_RE = re.compile(r"\b([A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+){1,3})\b")
_WORD_RE = re.compile(r"[A-Z][a-z]+")

# Words that introduce a name ("Dear Priya Sharma", "Contact John Smith")
NAME_LEADERS = ("contact", "dear", "hi", "hello", "mr", "mrs", "ms", "dr", "attn", "name")

# Capitalised words that are never part of a name (case-insensitive)
NAME_DENYLIST = frozenset(NAME_LEADERS + (
    "full", "user", "username", "email", "mail", "phone", "mobile", "call",
    "address", "passport", "card", "credit", "debit", "account", "bank",
    "birthday", "license", "driving", "aadhaar", "the", "please", "thanks",
))

class NameDetector(PiiDetector):
    category = PiiCategory.NAME
    pattern = NAME_RE
    keywords = ("name", "user", "full name", "username")
    requires_context = True

    def find(self, text: str) -> Iterator[Tuple[str, int, int]]:
        """Yield name hits with label and salutation words trimmed off both ends.

        A hit left with fewer than two words is dropped.
        """
        for value, start, end in super().find(text):
            words = [w.span() for w in _WORD_RE.finditer(value)]
            while words and value[words[0][0]:words[0][1]].lower() in NAME_DENYLIST:
                words.pop(0)
            while words and value[words[-1][0]:words[-1][1]].lower() in NAME_DENYLIST:
                words.pop()
            if len(words) < 2:
                continue
            lo, hi = words[0][0], words[-1][1]
            yield value[lo:hi], start + lo, start + hi
