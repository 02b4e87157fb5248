"""Dependency-manifest analysis for growth tooling."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

# Named user actions a growth-ready product is expected to track
CRITICAL_EVENTS: Tuple[str, ...] = (
    "user_signup",
    "user_login",
    "payment_completed",
    "subscription_created",
    "trial_started",
    "onboarding_completed",
    "feature_used",
    "invite_sent",
    "upgrade_clicked",
)

VANITY_METRICS: Tuple[str, ...] = (
    "page_view",
    "total_sessions",
    "bounce_rate",
    "time_on_site",
    "scroll_depth",
)

ANALYTICS_LIBS: Tuple[str, ...] = (
    "posthog-js",
    "@posthog/posthog-js",
    "mixpanel-browser",
    "segment-analytics",
    "@amplitude/analytics-browser",
)

PAYMENT_LIBS: Tuple[str, ...] = ("stripe", "paddle", "@lemonsqueezy/lemonsqueezy.js")

AUTH_LIBS: Tuple[str, ...] = ("@supabase/supabase-js", "next-auth", "auth0")


@dataclass(frozen=True)
class StackFindings:
    """What the manifest says about the analytics, payment and auth stack.

    Attributes:
        found: Analytics SDKs declared in the manifest, in roster order
        missing: Analytics SDKs not declared, in roster order
        has_payments: Whether a payment SDK is a runtime dependency
        has_auth: Whether an auth SDK is a runtime dependency
    """
    found: Tuple[str, ...] = ()
    missing: Tuple[str, ...] = ANALYTICS_LIBS
    has_payments: bool = False
    has_auth: bool = False


def _section(manifest: Mapping[str, Any], key: str) -> Dict[str, Any]:
    deps = manifest.get(key)
    return dict(deps) if isinstance(deps, Mapping) else {}


def merged_dependencies(manifest: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge ``dependencies`` and ``devDependencies``; dev entries win on clash."""
    merged = _section(manifest, "dependencies")
    merged.update(_section(manifest, "devDependencies"))
    return merged


def check_analytics_stack(manifest: Mapping[str, Any]) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    """Split the analytics roster into declared and undeclared SDKs.

    Only membership is checked; versions and actual imports are not.

    Returns:
        ``(found, missing)`` tuples, both in roster order
    """
    deps = merged_dependencies(manifest)
    found = tuple(lib for lib in ANALYTICS_LIBS if lib in deps)
    missing = tuple(lib for lib in ANALYTICS_LIBS if lib not in deps)
    return found, missing


def has_payment_sdk(manifest: Mapping[str, Any]) -> bool:
    runtime = _section(manifest, "dependencies")
    return any(lib in runtime for lib in PAYMENT_LIBS)


def has_auth_sdk(manifest: Mapping[str, Any]) -> bool:
    runtime = _section(manifest, "dependencies")
    return any(lib in runtime for lib in AUTH_LIBS)


def has_vanity_metrics(manifest: Mapping[str, Any]) -> bool:
    """Whether the compact JSON text of the manifest mentions a vanity metric."""
    text = json.dumps(manifest, separators=(",", ":"), ensure_ascii=False)
    return any(metric in text for metric in VANITY_METRICS)


def analyze_manifest(manifest: Mapping[str, Any]) -> StackFindings:
    """Run every manifest check and collect the results."""
    found, missing = check_analytics_stack(manifest)
    return StackFindings(
        found=found,
        missing=missing,
        has_payments=has_payment_sdk(manifest),
        has_auth=has_auth_sdk(manifest),
    )
