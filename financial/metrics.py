"""Prometheus metrics for the CRUD surface."""

from prometheus_client import Counter

ENTITY_WRITES = Counter(
    "financial_entity_writes_total",
    "Committed entity writes",
    ["entity", "op"],  # entity=category|user|transaction; op=create|update|delete
)

VALIDATION_FAILURES = Counter(
    "financial_validation_failures_total",
    "Writes rejected by validation rules",
    ["entity"],
)

HTTP_ERRORS = Counter(
    "financial_http_errors_total",
    "HTTP 5xx errors by route",
    ["route"],
)

# Prime label series so they appear immediately in /metrics
for _entity in ("category", "user", "transaction"):
    VALIDATION_FAILURES.labels(entity=_entity).inc(0)
    for _op in ("create", "update", "delete"):
        ENTITY_WRITES.labels(entity=_entity, op=_op).inc(0)
