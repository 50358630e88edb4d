"""Supplemental detection seam.

An optional async collaborator (typically a generative model) may propose
extra `(category, literal value)` candidates for a text. Its contract is
loose: it can be slow, fail, or answer with prose around a JSON array. This
module turns whatever it returns into `PiiMatch` candidates or raises one of:

- MalformedCollaboratorResponse: the payload is not a candidate list
- CollaboratorUnavailable: the call raised or timed out

`pii_lens.pii.engine.detect` catches both and continues with pattern
matches only. Candidates with a category outside `PiiCategory` are ignored.
"""

from __future__ import annotations
import asyncio
import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Protocol
from .base import DEFAULT_CONFIDENCE, PiiCategory, PiiMatch, Span
from .errors import CollaboratorUnavailable, MalformedCollaboratorResponse
from .mask import mask

log = logging.getLogger("pii_lens.supplemental")

_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)
_CATEGORY_KEYS = ("category", "type")
_VALUE_KEYS = ("value", "literal_value", "literalValue")

class SupplementalDetector(Protocol):
    async def __call__(self, text: str) -> Any:
        ...

async def null_supplemental(text: str) -> List[Any]:
    """No-op collaborator."""
    return []

@dataclass(frozen=True)
class SupplementalCandidate:
    category: PiiCategory
    value: str

def _extract_json_array(reply: str) -> Any:
    body = _FENCE_RE.sub("", reply).strip()
    try:
        parsed = json.loads(body)
    except json.JSONDecodeError:
        parsed = None
    if isinstance(parsed, list):
        return parsed
    # prose around the array, or an object wrapping it: {"items": [...]}
    lo, hi = body.find("["), body.rfind("]")
    if lo == -1 or hi <= lo:
        raise MalformedCollaboratorResponse("no JSON array in collaborator reply")
    try:
        return json.loads(body[lo:hi + 1])
    except json.JSONDecodeError as e:
        raise MalformedCollaboratorResponse(f"unparseable JSON array: {e}") from e

def _first(item: Mapping[str, Any], keys: Iterable[str]) -> Any:
    for k in keys:
        if k in item:
            return item[k]
    return None

def parse_candidates(payload: Any) -> List[SupplementalCandidate]:
    if isinstance(payload, (str, bytes)):
        if isinstance(payload, bytes):
            payload = payload.decode("utf-8", errors="replace")
        payload = _extract_json_array(payload)
    if not isinstance(payload, (list, tuple)):
        raise MalformedCollaboratorResponse(f"expected a list of candidates, got {type(payload).__name__}")

    out: List[SupplementalCandidate] = []
    for item in payload:
        if isinstance(item, SupplementalCandidate):
            out.append(item)
            continue
        if isinstance(item, Mapping):
            raw_cat, value = _first(item, _CATEGORY_KEYS), _first(item, _VALUE_KEYS)
        elif isinstance(item, (list, tuple)) and len(item) == 2:
            raw_cat, value = item
        else:
            log.debug(f"ignoring candidate of type {type(item).__name__}")
            continue
        if not isinstance(value, str) or not value:
            continue
        try:
            category = raw_cat if isinstance(raw_cat, PiiCategory) else PiiCategory.parse(raw_cat)
        except ValueError:
            log.debug(f"ignoring candidate with unknown category {raw_cat!r}")
            continue
        out.append(SupplementalCandidate(category, value))
    return out

def find_positions(text: str, value: str) -> List[Span]:
    """Every occurrence of `value` in `text`, overlapping ones included."""
    spans: List[Span] = []
    idx = text.find(value)
    while idx != -1:
        spans.append(Span(idx, idx + len(value)))
        idx = text.find(value, idx + 1)
    return spans

def locate_candidates(
    text: str,
    candidates: Iterable[SupplementalCandidate],
    confidence: float = DEFAULT_CONFIDENCE,
) -> List[PiiMatch]:
    out: List[PiiMatch] = []
    for c in candidates:
        masked = mask(c.value, c.category)
        for span in find_positions(text, c.value):
            out.append(PiiMatch(
                category=c.category,
                raw_value=c.value,
                masked_value=masked,
                span=span,
                confidence=confidence,
                source="supplemental",
            ))
    return out

async def fetch_candidates(
    supplemental: SupplementalDetector,
    text: str,
    timeout: Optional[float] = None,
) -> List[SupplementalCandidate]:
    """Await the collaborator once, bounded by `timeout` seconds."""
    try:
        payload = await asyncio.wait_for(supplemental(text), timeout=timeout)
    except asyncio.TimeoutError as e:
        raise CollaboratorUnavailable(f"supplemental detector timed out after {timeout}s") from e
    except Exception as e:
        raise CollaboratorUnavailable(f"supplemental detector failed: {e}") from e
    return parse_candidates(payload)
