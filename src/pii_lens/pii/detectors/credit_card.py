from __future__ import annotations
import re
from ..base import PiiCategory, PiiDetector

# 13-19 contiguous digits, 4-4-4-N groups (N up to 7) or the 4-6-5 Amex layout,
# separated by single spaces or dashes
CREDIT_CARD_RE = re.compile(
    r"\b(?:\d{13,19}|\d{4}(?:[ -]\d{4}){2}[ -]\d{1,7}|\d{4}[ -]\d{6}[ -]\d{4,5})\b"
)

class CreditCardDetector(PiiDetector):
    category = PiiCategory.CREDIT_CARD
    pattern = CREDIT_CARD_RE
    keywords = ("card", "credit", "debit", "visa")
    requires_context = False
