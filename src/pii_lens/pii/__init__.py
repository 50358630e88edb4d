"""PII detection and redaction engine.

Pipeline for one text:
    scan (recovery + catalog patterns + context)  ->  resolve  ->  mask / render / summarize

The catalog of detectors is closed and built on import; see
`pii_lens.pii.registry`.
"""

from .base import DEFAULT_CONFIDENCE, PiiCategory, PiiDetector, PiiMatch, PiiSummary, Span
from .errors import (
    CollaboratorUnavailable,
    InvalidCategoryMask,
    MalformedCollaboratorResponse,
    PiiLensError,
)
from .registry import get_detector, iter_detectors, list_detectors
from .mask import mask
from .scanner import scan
from .resolve import resolve
from .redact import line_breaks, redact_text, render
from .summary import summarize, total_count
from .supplemental import SupplementalDetector, null_supplemental
from .engine import detect, detect_sync, scan_text

__all__ = [
    "DEFAULT_CONFIDENCE",
    "PiiCategory",
    "PiiDetector",
    "PiiMatch",
    "PiiSummary",
    "Span",
    "PiiLensError",
    "MalformedCollaboratorResponse",
    "CollaboratorUnavailable",
    "InvalidCategoryMask",
    "get_detector",
    "iter_detectors",
    "list_detectors",
    "mask",
    "scan",
    "resolve",
    "render",
    "redact_text",
    "line_breaks",
    "summarize",
    "total_count",
    "SupplementalDetector",
    "null_supplemental",
    "detect",
    "detect_sync",
    "scan_text",
]
