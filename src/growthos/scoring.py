"""Heuristic growth score calculation."""

from typing import Any, List, Mapping, Optional, Sequence

from growthos.config import ScoringWeights
from growthos.manifest import StackFindings, has_vanity_metrics
from growthos.types import AuditScore


def event_score(patterns: Sequence[str], weights: Optional[ScoringWeights] = None) -> int:
    """Points for matched event-tracking patterns, capped at ``event_cap``."""
    w = weights or ScoringWeights()
    return min(w.event_cap, len(set(patterns)) * w.per_event_pattern)


def calculate_growth_score(
    findings: StackFindings,
    event_patterns: Sequence[str],
    manifest: Mapping[str, Any],
    weights: Optional[ScoringWeights] = None,
) -> AuditScore:
    """Combine manifest findings and search hits into an AuditScore.

    Checks run in a fixed order (analytics, events, payment, auth, vanity)
    and that order is preserved in ``missing`` and ``recommendations``.

    Args:
        findings: Result of :func:`growthos.manifest.analyze_manifest`
        event_patterns: Search queries that matched at least one file
        manifest: The parsed ``package.json``, scanned for vanity metrics
        weights: Point weights; defaults to :class:`ScoringWeights`

    Returns:
        AuditScore with ``total`` clamped to [0, 100]
    """
    w = weights or ScoringWeights()
    score = 0
    missing: List[str] = []
    recommendations: List[str] = []

    if findings.found:
        score += w.analytics
    else:
        missing.append("Analytics library (PostHog, Mixpanel, etc.)")
        recommendations.append("Add PostHog for privacy-first analytics")

    score += event_score(event_patterns, w)
    if not event_patterns:
        missing.append("Event tracking calls")
        recommendations.append("Track user actions with .capture() calls")

    if findings.has_payments:
        score += w.payment
    else:
        missing.append("Payment tracking")
        recommendations.append("Track subscription/payment events for revenue analytics")

    if findings.has_auth:
        score += w.auth
    else:
        missing.append("User authentication events")
        recommendations.append("Track signup/login for user journey analysis")

    if has_vanity_metrics(manifest):
        score -= w.vanity_penalty
        recommendations.append("Remove vanity metrics - focus on business KPIs")

    return AuditScore(
        total=max(0, min(100, score)),
        missing=tuple(missing),
        recommendations=tuple(recommendations),
    )
