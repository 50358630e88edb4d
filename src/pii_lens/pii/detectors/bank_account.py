from __future__ import annotations
import re
from ..base import PiiCategory, PiiDetector

BANK_ACCOUNT_RE = re.compile(r"\b\d{9,18}\b")

class BankAccountDetector(PiiDetector):
    category = PiiCategory.BANK_ACCOUNT
    pattern = BANK_ACCOUNT_RE
    keywords = ("account", "bank", "iban")
    requires_context = True
