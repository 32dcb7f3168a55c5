"""Prometheus metrics for address verification."""

from typing import Any

from prometheus_client import REGISTRY, Counter, Histogram


def _get_existing(name: str) -> Any:
    """Return an already-registered collector, if any.

    Re-importing this module (e.g. under test reloaders) would otherwise raise
    a duplicate registration error.
    """
    return REGISTRY._names_to_collectors.get(name)


def get_or_create_counter(name: str, description: str, labels: list[str]) -> Counter:
    """Get existing counter from registry or create new one."""
    existing = _get_existing(name)
    if existing is not None:
        return existing
    return Counter(name, description, labels)


def get_or_create_histogram(
    name: str, description: str, buckets: tuple[float, ...]
) -> Histogram:
    """Get existing histogram from registry or create new one."""
    existing = _get_existing(name)
    if existing is not None:
        return existing
    return Histogram(name, description, buckets=buckets)


VERIFICATION_REQUESTS_TOTAL = get_or_create_counter(
    "address_verification_requests_total",
    "Provider requests made, by route",
    ["route"],
)

VERIFICATION_SKIPPED_TOTAL = get_or_create_counter(
    "address_verification_skipped_total",
    "Verifications skipped by the eligibility gate, by reason",
    ["reason"],
)

VERIFICATION_OUTCOMES_TOTAL = get_or_create_counter(
    "address_verification_outcomes_total",
    "Verification outcomes after a provider request",
    ["outcome"],
)

VERIFICATION_REQUEST_SECONDS = get_or_create_histogram(
    "address_verification_request_seconds",
    "Time spent waiting on the provider",
    buckets=(0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)


def record_skipped(reason: str) -> None:
    """Count a verification skipped by the eligibility gate."""
    VERIFICATION_SKIPPED_TOTAL.labels(reason=reason).inc()


def record_request(route: str, seconds: float) -> None:
    """Count a provider request and observe its latency."""
    VERIFICATION_REQUESTS_TOTAL.labels(route=route).inc()
    VERIFICATION_REQUEST_SECONDS.observe(seconds)


def record_outcome(outcome: str) -> None:
    """Count the outcome of a verification that reached the provider."""
    VERIFICATION_OUTCOMES_TOTAL.labels(outcome=outcome).inc()

