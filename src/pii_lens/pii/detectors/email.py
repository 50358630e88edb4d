from __future__ import annotations
import re
from ..base import PiiCategory, PiiDetector

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")

class EmailDetector(PiiDetector):
    category = PiiCategory.EMAIL
    pattern = EMAIL_RE
    keywords = ("email", "e-mail", "contact@")
    requires_context = False
