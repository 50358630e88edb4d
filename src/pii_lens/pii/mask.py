"""Per-category masking.

Every rule is structure-preserving: separators stay where they were and only
a fixed prefix/suffix (or nothing) of the value is revealed. A value no longer
than its category's reveal window is masked entirely.

Rules:
- Name: first 2 characters, rest `*`
- Mobile / BankAccount: last 4 digits, earlier digits `*`
- Email: first local character and first domain character (`j****@e****`);
  anything without an `@` (obfuscated forms) becomes `****@****.***`
- Aadhaar: every digit `A`
- CreditCard: every digit but the last 4 becomes `C`
- Address: numeric tokens become `&&`
- Birthday: every digit `B`
- Passport: first 2 and last 2 characters
- DriversLicense: first 3 and last 2 characters
"""

from __future__ import annotations
import re
from typing import Never, NoReturn
from .base import PiiCategory
from .errors import InvalidCategoryMask

MASK_CHAR = "*"
OBFUSCATED_EMAIL_MASK = "****@****.***"

_EMAIL_SHAPE_RE = re.compile(r"^(.)(.*)(@.)(.*)$", re.DOTALL)
_NUMBER_TOKEN_RE = re.compile(r"\b\d+\b")

def _keep_edges(value: str, head: int, tail: int) -> str:
    if len(value) <= head + tail:
        return MASK_CHAR * len(value)
    return value[:head] + MASK_CHAR * (len(value) - head - tail) + value[len(value) - tail:]

def _keep_last_digits(value: str, keep: int, sentinel: str) -> str:
    total = sum(ch.isdigit() for ch in value)
    if total <= keep:
        return re.sub(r"\d", sentinel, value)
    out, seen = [], 0
    for ch in value:
        if ch.isdigit():
            seen += 1
            out.append(ch if seen > total - keep else sentinel)
        else:
            out.append(ch)
    return "".join(out)

def _mask_email(value: str) -> str:
    m = _EMAIL_SHAPE_RE.match(value)
    if not m:
        return OBFUSCATED_EMAIL_MASK
    return f"{m.group(1)}****{m.group(3)}****"

def _unmaskable(category: Never) -> NoReturn:
    raise InvalidCategoryMask(f"No masking rule for category {category!r}")

def mask(value: str, category: PiiCategory) -> str:
    """Return the redacted display form of `value`."""
    if not isinstance(category, PiiCategory):
        raise InvalidCategoryMask(f"Not a PiiCategory: {category!r}")
    if category is PiiCategory.NAME:
        return _keep_edges(value, 2, 0)
    elif category is PiiCategory.MOBILE or category is PiiCategory.BANK_ACCOUNT:
        return _keep_last_digits(value, 4, MASK_CHAR)
    elif category is PiiCategory.EMAIL:
        return _mask_email(value)
    elif category is PiiCategory.AADHAAR:
        return re.sub(r"\d", "A", value)
    elif category is PiiCategory.CREDIT_CARD:
        return _keep_last_digits(value, 4, "C")
    elif category is PiiCategory.ADDRESS:
        return _NUMBER_TOKEN_RE.sub("&&", value)
    elif category is PiiCategory.BIRTHDAY:
        return re.sub(r"\d", "B", value)
    elif category is PiiCategory.PASSPORT:
        return _keep_edges(value, 2, 2)
    elif category is PiiCategory.DRIVERS_LICENSE:
        return _keep_edges(value, 3, 2)
    else:
        _unmaskable(category)
