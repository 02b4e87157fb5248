"""Report construction and console text for audit results."""

from datetime import datetime, timezone
from typing import List, Optional

import click

from growthos.types import AuditReport, AuditScore


def _iso_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_report(score: AuditScore, audit_date: Optional[str] = None) -> AuditReport:
    """Build the report object for an audit score.

    Args:
        score: The audit result
        audit_date: ISO-8601 timestamp; defaults to the current UTC time

    Returns:
        AuditReport carrying the score, issues, recommendations and next steps
    """
    return AuditReport(
        score=score.total,
        audit_date=audit_date or _iso_now(),
        issues=list(score.missing),
        recommendations=list(score.recommendations),
    )


def generate_audit_report(score: AuditScore, filename: str) -> AuditReport:
    """Build the report and announce where it will be saved.

    Only the JSON report is produced for now; PDF rendering is out of scope.
    Writing the report to disk is left to a later version.
    """
    report = build_report(score)
    click.secho(f"📄 Report saved: {filename}.json", fg="green")
    return report


def render_summary(score: AuditScore) -> List[str]:
    """Plain console lines describing the score and what is missing."""
    lines = [
        f"\n✅ Growth Score: {score.total}/100",
        f"\n📊 Missing {len(score.missing)} critical events:",
    ]
    lines.extend(f"   {i}. {item}" for i, item in enumerate(score.missing, start=1))
    return lines


def share_message(score: AuditScore) -> str:
    """Text suitable for posting the score on social media."""
    highlights = ", ".join(score.missing[:2])
    return (
        f'Just scored {score.total}/100 on growth tracking with @GrowthOS'
        f" - here's what I'm missing: {highlights}"
    )
