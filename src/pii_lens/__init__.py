"""pii_lens

Find personally identifiable information in free-form text, then mask,
highlight or summarize it.

Public API surface:
- pii_lens.detect / detect_sync : resolved, non-overlapping matches for a text
- pii_lens.summarize : per-category counts and average confidence
- pii_lens.render : highlighted or masked rendition with category tags
- pii_lens.mask : masked display form of one value
- pii_lens.cli.main : CLI entrypoint
"""
from .pii import detect, detect_sync, mask, render, summarize

__all__ = ["__version__", "detect", "detect_sync", "mask", "render", "summarize"]
__version__ = "0.1.0"
