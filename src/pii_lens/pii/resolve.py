"""Conflict resolution.

Turns an overlapping candidate pool into the final match list: sorted by
start, pairwise non-overlapping.

1) Containment: a candidate is dropped when another candidate's span fully
   contains it. On identical spans the earlier-registered candidate wins
   (pattern hits are registered before collaborator hits).
2) Partial overlap: of two survivors that still overlap, the one starting
   first is kept.

Longer, more specific matches therefore win: an Address swallows the
Mobile-looking number inside it.
"""

from __future__ import annotations
from typing import Iterable, List
from .base import PiiMatch

def resolve(candidates: Iterable[PiiMatch]) -> List[PiiMatch]:
    indexed = list(enumerate(candidates))
    # start asc, longest first, then registration order
    indexed.sort(key=lambda im: (im[1].start, -im[1].end, im[0]))

    survivors: List[PiiMatch] = []
    max_end = -1
    for _, m in indexed:
        # every earlier item starts at or before m; one reaching m.end contains it
        if max_end >= m.end:
            continue
        max_end = m.end
        survivors.append(m)

    final: List[PiiMatch] = []
    for m in survivors:
        if final and final[-1].span.overlaps(m.span):
            continue
        final.append(m)
    return final
