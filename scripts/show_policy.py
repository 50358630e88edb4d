"""Show the effective scan policy (defaults filled in) for a policy file.

Usage:
    python scripts/show_policy.py [policy_file]
"""

from __future__ import annotations
import sys
from pathlib import Path
from pii_lens.pii.registry import iter_detectors
from pii_lens.policies.loader import load_policy, load_yaml

def show_policy(policy_path: str):
    """Display the raw and effective values of a scan policy."""
    print(f"\n{'='*60}")
    print(f"Scan Policy: {policy_path}")
    print(f"{'='*60}\n")

    raw = load_yaml(policy_path)
    policy = load_policy(policy_path)

    print(f"  Context Window: {policy.context_window} chars")
    print(f"  URL Window: {policy.url_window} chars")
    print(f"  Default Confidence: {policy.default_confidence:.2f}")
    print(f"  Min Confidence: {policy.min_confidence:.2f}")
    print(f"  Supplemental: {'enabled' if policy.supplemental_enabled else 'disabled'}"
          f" (timeout {policy.supplemental_timeout}s)")
    print(f"  Line Breaks: {policy.line_breaks}")
    print()

    print("  Categories:")
    for det in iter_detectors():
        on = not policy.categories or det.category in policy.categories
        ctx = "context required" if det.requires_context else "no context"
        print(f"    [{'x' if on else ' '}] {det.name:<16} {ctx}")
    print()

    unknown = sorted(set(raw) - {"context_window", "url_window", "default_confidence",
                                 "min_confidence", "categories", "supplemental", "render"})
    if unknown:
        print(f"  ⚠️  Unrecognized keys (ignored): {', '.join(unknown)}")
        print()

    print(f"{'='*60}\n")

if __name__ == "__main__":
    policy_path = sys.argv[1] if len(sys.argv) > 1 else "policies/scan.yaml"

    if not Path(policy_path).exists():
        print(f"Error: Policy file not found: {policy_path}")
        sys.exit(1)

    show_policy(policy_path)
