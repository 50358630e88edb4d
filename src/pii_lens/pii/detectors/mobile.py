from __future__ import annotations
import re
from ..base import PiiCategory, PiiDetector

# Indian mobile: optional +/91 prefix, then 10 digits starting 6-9
MOBILE_RE = re.compile(r"(?<![\w+])(\+?(?:91[\-\s]?)?[6-9]\d{9})(?!\d)")

class MobileDetector(PiiDetector):
    category = PiiCategory.MOBILE
    pattern = MOBILE_RE
    keywords = ("mobile", "phone", "contact", "whatsapp")
    requires_context = True
