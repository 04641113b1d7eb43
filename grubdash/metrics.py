"""
Prometheus metrics: records created/updated/deleted per resource, requests rejected by the pipelines.
"""
from prometheus_client import Counter, generate_latest

records_created_total = Counter(
    "records_created_total",
    "Total records created (201)",
    ["resource"],
)
records_updated_total = Counter(
    "records_updated_total",
    "Total records updated in place",
    ["resource"],
)
records_deleted_total = Counter(
    "records_deleted_total",
    "Total records removed from a store",
    ["resource"],
)

# Pipeline: first failing validator per request, by error class
requests_rejected_total = Counter(
    "requests_rejected_total",
    "Total requests rejected by a validation pipeline",
    ["resource", "reason"],
)


def get_metrics_content_type():
    return "text/plain; charset=utf-8; version=0.0.4"


def get_metrics_bytes():
    return generate_latest()
