"""Policy loader.

Scan policies are YAML files with simple keys used by the engine and CLI.
Keeping policies in YAML allows:
- easy review by legal/compliance
- versioned configuration across deployments
- non-engineers to propose changes safely

Policy YAML example:
```yaml
context_window: 50
url_window: 10
default_confidence: 0.8
min_confidence: 0.0
categories: []            # empty = all
supplemental:
  enabled: true
  timeout_seconds: 10.0
render:
  line_breaks: false
```
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional
import yaml
from ..pii.base import DEFAULT_CONFIDENCE, PiiCategory

def load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}

@dataclass(frozen=True)
class ScanPolicy:
    context_window: int = 50
    url_window: int = 10
    default_confidence: float = DEFAULT_CONFIDENCE
    min_confidence: float = 0.0
    categories: FrozenSet[PiiCategory] = field(default_factory=frozenset)  # empty = all
    supplemental_enabled: bool = True
    supplemental_timeout: Optional[float] = 10.0
    line_breaks: bool = False

    @classmethod
    def from_dict(cls, policy: Optional[Dict[str, Any]]) -> "ScanPolicy":
        policy = policy or {}
        sup = policy.get("supplemental") or {}
        rnd = policy.get("render") or {}
        timeout = sup.get("timeout_seconds", 10.0)
        conf = float(policy.get("default_confidence", DEFAULT_CONFIDENCE))
        if not 0.0 <= conf <= 1.0:
            raise ValueError(f"default_confidence must be within [0, 1], got {conf}")
        return cls(
            context_window=int(policy.get("context_window", 50)),
            url_window=int(policy.get("url_window", 10)),
            default_confidence=conf,
            min_confidence=float(policy.get("min_confidence", 0.0)),
            categories=frozenset(PiiCategory.parse(c) for c in (policy.get("categories") or [])),
            supplemental_enabled=bool(sup.get("enabled", True)),
            supplemental_timeout=None if timeout is None else float(timeout),
            line_breaks=bool(rnd.get("line_breaks", False)),
        )

def load_policy(path: Optional[str]) -> ScanPolicy:
    """Load a ScanPolicy from YAML; no path gives the defaults."""
    if not path:
        return ScanPolicy()
    return ScanPolicy.from_dict(load_yaml(path))
