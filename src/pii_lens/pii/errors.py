"""Error taxonomy.

Collaborator failures are recoverable: the engine catches them and carries on
with the deterministic pass alone. A mask request for a category outside the
closed enumeration is a programming error and propagates.
"""

from __future__ import annotations

class PiiLensError(Exception):
    """Base class for pii_lens errors."""

class MalformedCollaboratorResponse(PiiLensError):
    """The supplemental detector returned data that is not a candidate list."""

class CollaboratorUnavailable(PiiLensError):
    """The supplemental detector call failed or timed out."""

class InvalidCategoryMask(PiiLensError, ValueError):
    """Masking was requested for a value that is not a PiiCategory."""
