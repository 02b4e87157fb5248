"""End-to-end repository audit: fetch, analyze, score, report."""

import logging
from typing import Optional

import click
import httpx

from growthos.config import GrowthConfig
from growthos.github import RepositoryFetcher, parse_repo
from growthos.manifest import analyze_manifest
from growthos.report import generate_audit_report
from growthos.scoring import calculate_growth_score
from growthos.types import AuditScore

logger = logging.getLogger(__name__)


def audit_repo(
    repo_path: str,
    output: Optional[str] = None,
    config: Optional[GrowthConfig] = None,
    client: Optional[httpx.Client] = None,
) -> AuditScore:
    """Audit a public GitHub repository's growth instrumentation.

    Args:
        repo_path: ``owner/repo``; further path segments are ignored
        output: Report name to announce; no report when None
        config: Settings for the API client and scoring weights
        client: Optional ``httpx.Client`` to issue requests with

    Returns:
        The AuditScore for the repository

    Raises:
        RepositoryNotFoundError: If the manifest is missing or the repo is private
    """
    cfg = config or GrowthConfig()
    owner, repo = parse_repo(repo_path)

    click.secho(f"📡 Fetching {owner}/{repo} from GitHub...", fg="bright_black")

    with RepositoryFetcher(cfg.github, client=client) as fetcher:
        manifest = fetcher.fetch_manifest(owner, repo)
        findings = analyze_manifest(manifest)
        event_patterns = fetcher.scan_for_events(owner, repo)

    logger.debug(
        "%s/%s: analytics=%s patterns=%s payments=%s auth=%s",
        owner, repo, list(findings.found), event_patterns,
        findings.has_payments, findings.has_auth,
    )
    score = calculate_growth_score(findings, event_patterns, manifest, cfg.scoring)

    if output:
        generate_audit_report(score, output)

    return score
