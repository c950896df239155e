"""Prometheus metrics for advice traffic, calculator usage, and saved decisions"""

from prometheus_client import Counter, Histogram

# Advice provider metrics
advice_request_counter = Counter(
    "clarity_advice_requests_total",
    "Advice and suggestion requests sent to the provider",
    ["decision_type", "outcome"],  # outcome: success | provider_error | invalid_response | error
)

advice_latency_histogram = Histogram(
    "clarity_advice_latency_seconds",
    "Advice provider response time",
    ["decision_type"],
    buckets=[0.5, 1.0, 2.5, 5.0, 10.0, 20.0, 30.0, 60.0],
)

# Calculator metrics
calculation_counter = Counter(
    "clarity_calculations_total",
    "Deterministic calculations served",
    ["calculator"],  # financing | consortium | comparison | weighted_scores
)

# History metrics
decision_saved_counter = Counter(
    "clarity_decisions_saved_total",
    "Final decisions appended to the history",
    ["decision_type"],
)

history_cleared_counter = Counter(
    "clarity_history_cleared_total",
    "Times the decision history was cleared",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_advice(decision_type: str, outcome: str, duration_seconds: float) -> None:
    """Record one advice round-trip"""
    advice_request_counter.labels(decision_type=decision_type, outcome=outcome).inc()
    advice_latency_histogram.labels(decision_type=decision_type).observe(duration_seconds)


def record_calculation(calculator: str) -> None:
    calculation_counter.labels(calculator=calculator).inc()


def record_decision_saved(decision_type: str) -> None:
    decision_saved_counter.labels(decision_type=decision_type).inc()
