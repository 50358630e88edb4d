from __future__ import annotations
import re
from ..base import PiiCategory, PiiDetector

PASSPORT_RE = re.compile(r"\b[A-Z]{1,3}[0-9]{6,9}\b")

class PassportDetector(PiiDetector):
    category = PiiCategory.PASSPORT
    pattern = PASSPORT_RE
    keywords = ("passport", "passport no", "travel document")
    requires_context = True
