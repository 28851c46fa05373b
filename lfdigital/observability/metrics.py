"""Prometheus metrics for the completion gateway and HTTP surface."""

from prometheus_client import Counter, Histogram

REQUEST_COUNT = Counter(
    "lfdigital_request_count_total",
    "Total number of HTTP requests processed",
    labelnames=["method", "path", "status"],
)

REQUEST_LATENCY = Histogram(
    "lfdigital_request_latency_seconds",
    "HTTP request latency in seconds",
    labelnames=["method", "path"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0),
)

# One increment per provider considered in a chain; outcome is one of
# success, not_configured, transport_failure, soft_failure, parse_failure, error
PROVIDER_ATTEMPTS = Counter(
    "lfdigital_provider_attempts_total",
    "Completion provider attempts by outcome",
    labelnames=["provider", "outcome"],
)

PROVIDER_LATENCY = Histogram(
    "lfdigital_provider_latency_seconds",
    "Latency of completion provider calls that reached the network",
    labelnames=["provider"],
    buckets=(0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 20.0, 30.0, 60.0),
)

CHAIN_EXHAUSTED = Counter(
    "lfdigital_provider_chain_exhausted_total",
    "Requests where every provider was skipped or failed",
    labelnames=["use_case"],
)

LOCAL_FALLBACKS = Counter(
    "lfdigital_local_fallbacks_total",
    "Requests answered by a deterministic local fallback",
    labelnames=["use_case"],
)
