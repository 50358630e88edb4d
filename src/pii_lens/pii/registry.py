"""PII detector catalog.

The catalog is closed: one detector per PiiCategory, built once at import and
read-only afterwards. Adding a category means adding a detector module here,
a keyword set on it, and a masking rule in `pii_lens.pii.mask`.

Iteration order is registration order. The Conflict Resolver keeps the
earlier-registered candidate when two share an identical span.
"""

from __future__ import annotations
from types import MappingProxyType
from typing import Iterator, List, Mapping
from .base import PiiCategory, PiiDetector
from .detectors.name import NameDetector
from .detectors.mobile import MobileDetector
from .detectors.email import EmailDetector
from .detectors.aadhaar import AadhaarDetector
from .detectors.credit_card import CreditCardDetector
from .detectors.bank_account import BankAccountDetector
from .detectors.address import AddressDetector
from .detectors.birthday import BirthdayDetector
from .detectors.passport import PassportDetector
from .detectors.drivers_license import DriversLicenseDetector

_DETECTORS: Mapping[PiiCategory, PiiDetector] = MappingProxyType({
    d.category: d
    for d in (
        NameDetector(),
        MobileDetector(),
        EmailDetector(),
        AadhaarDetector(),
        CreditCardDetector(),
        BankAccountDetector(),
        AddressDetector(),
        BirthdayDetector(),
        PassportDetector(),
        DriversLicenseDetector(),
    )
})

# Every category must have exactly one catalog entry
if set(_DETECTORS) != set(PiiCategory):
    missing = sorted(c.value for c in set(PiiCategory) - set(_DETECTORS))
    raise RuntimeError(f"PII catalog out of sync with PiiCategory, missing: {missing}")

def list_detectors() -> List[str]:
    return [c.value for c in _DETECTORS]

def iter_detectors() -> Iterator[PiiDetector]:
    return iter(_DETECTORS.values())

def get_detector(category: PiiCategory) -> PiiDetector:
    """Get the catalog entry for a category."""
    if category not in _DETECTORS:
        raise KeyError(
            f"Unknown PII category: {category}. "
            f"Available: {list_detectors()}"
        )
    return _DETECTORS[category]
