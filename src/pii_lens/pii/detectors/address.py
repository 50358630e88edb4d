from __future__ import annotations
import re
from ..base import PiiCategory, PiiDetector

# House number followed by words up to a street/locality type word
ADDRESS_RE = re.compile(
    r"\b\d{1,4}[\s,.-]*(?:[\w\s,.-]+?)(?:road|street|avenue|lane|city|town|village|nagar)\b",
    re.IGNORECASE,
)

class AddressDetector(PiiDetector):
    category = PiiCategory.ADDRESS
    pattern = ADDRESS_RE
    keywords = ("address", "location", "residence", "home")
    requires_context = True
