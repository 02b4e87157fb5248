from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Tuple

NEXT_STEPS: Tuple[str, ...] = (
    "Run: npx growthos init",
    "Add missing event tracking",
    "Set up PostHog dashboards",
    "Configure A/B testing",
)


@dataclass(frozen=True)
class AuditScore:
    """Result of one audit: bounded score plus the checks that failed."""

    total: int = 0
    missing: Tuple[str, ...] = ()
    recommendations: Tuple[str, ...] = ()


@dataclass
class AuditReport:
    """Shareable audit report with safe serialization."""

    score: int
    audit_date: str
    issues: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)
    next_steps: List[str] = field(default_factory=lambda: list(NEXT_STEPS))

    def to_dict(self) -> Dict[str, Any]:
        """Convert report to a plain dictionary."""
        return asdict(self)

    def to_json(self) -> str:
        """Serialize the report to indented JSON text."""
        return json.dumps(self.to_dict(), indent=2)
