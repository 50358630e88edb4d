from __future__ import annotations
import re
from ..base import PiiCategory, PiiDetector

# Aadhaar: 12 digits often grouped as 4-4-4; never starts with 0 or 1
AADHAAR_RE = re.compile(r"\b[2-9]\d{3}[\s-]?\d{4}[\s-]?\d{4}\b")

class AadhaarDetector(PiiDetector):
    category = PiiCategory.AADHAAR
    pattern = AADHAAR_RE
    keywords = ("aadhaar", "uid", "unique id")
    requires_context = False
