"""growthos: audit a repository's user-growth instrumentation.

This module provides tools for fetching a public repository's manifest and
code-search evidence and turning it into a 0-100 growth-tracking score with
a list of missing capabilities and recommendations.
"""

__version__ = "0.1.0"

# Core components
from growthos.exceptions import GrowthOSError, RepositoryNotFoundError
from growthos.scanner import audit_repo
from growthos.scoring import calculate_growth_score
from growthos.types import AuditReport, AuditScore

__all__ = [
    "GrowthOSError",
    "RepositoryNotFoundError",
    "audit_repo",
    "calculate_growth_score",
    "AuditReport",
    "AuditScore",
]
