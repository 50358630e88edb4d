"""Detection entry points.

`detect()` is the one call presentation code needs:

    matches = await detect(text, supplemental=my_model_client)

The deterministic pass always runs. The supplemental collaborator, when
given and enabled by policy, is awaited once (bounded by the policy timeout);
its candidates join the pool *after* the pattern candidates and go through
the same resolution. Any collaborator failure leaves the pattern result
intact.
"""

from __future__ import annotations
import asyncio
import logging
from typing import List, Optional
from ..policies.loader import ScanPolicy
from .base import PiiMatch
from .errors import CollaboratorUnavailable, MalformedCollaboratorResponse
from .resolve import resolve
from .scanner import scan
from .supplemental import SupplementalDetector, fetch_candidates, locate_candidates

log = logging.getLogger("pii_lens.engine")

def _scan(text: str, policy: ScanPolicy) -> List[PiiMatch]:
    return scan(
        text,
        context_window=policy.context_window,
        url_window=policy.url_window,
        confidence=policy.default_confidence,
        categories=policy.categories or None,
    )

def _finalize(candidates: List[PiiMatch], policy: ScanPolicy) -> List[PiiMatch]:
    final = resolve(candidates)
    if policy.min_confidence > 0:
        final = [m for m in final if m.confidence >= policy.min_confidence]
    log.debug(f"candidates={len(candidates)} final={len(final)}")
    return final

def scan_text(text: str, policy: Optional[ScanPolicy] = None) -> List[PiiMatch]:
    """Deterministic pass only, resolved."""
    policy = policy or ScanPolicy()
    return _finalize(_scan(text, policy), policy)

async def detect(
    text: str,
    supplemental: Optional[SupplementalDetector] = None,
    *,
    policy: Optional[ScanPolicy] = None,
) -> List[PiiMatch]:
    policy = policy or ScanPolicy()
    if not text or not text.strip():
        return []

    candidates = _scan(text, policy)

    if supplemental is not None and policy.supplemental_enabled:
        try:
            extra = await fetch_candidates(supplemental, text, policy.supplemental_timeout)
        except (CollaboratorUnavailable, MalformedCollaboratorResponse) as e:
            log.warning(f"supplemental detection skipped: {e}")
        else:
            if policy.categories:
                extra = [c for c in extra if c.category in policy.categories]
            located = locate_candidates(text, extra, policy.default_confidence)
            log.debug(f"supplemental candidates={len(extra)} occurrences={len(located)}")
            candidates.extend(located)

    return _finalize(candidates, policy)

def detect_sync(
    text: str,
    supplemental: Optional[SupplementalDetector] = None,
    *,
    policy: Optional[ScanPolicy] = None,
) -> List[PiiMatch]:
    """Blocking wrapper around `detect()` for callers without an event loop."""
    return asyncio.run(detect(text, supplemental, policy=policy))
