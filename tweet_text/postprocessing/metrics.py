"""
Prometheus Metrics: extraction observability.

Exposes counters and a histogram for:
- Entities emitted per kind
- Candidates rejected per kind and reason (boundary checks, overlap)
- Extraction latency

Usage
-----
    from tweet_text.postprocessing.metrics import timed_extraction, record_entity

    with timed_extraction():
        entities = extract_entities(text)
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram

# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# Entities that survived every check, labelled by kind.
ENTITIES_EXTRACTED: Counter = Counter(
    "entities_extracted_total",
    "Total entities emitted by kind",
    ["kind"],
)

# Candidates discarded after matching, labelled by kind and reason.
CANDIDATES_REJECTED: Counter = Counter(
    "entity_candidates_rejected_total",
    "Candidate matches discarded by a boundary check or overlap resolution",
    ["kind", "reason"],
)

# End-to-end extraction latency (seconds).
EXTRACTION_LATENCY: Histogram = Histogram(
    "entity_extraction_seconds",
    "Time spent in extract_entities in seconds",
    buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5),
)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def record_entity(kind: str) -> None:
    """Increment the emitted-entity counter for *kind*."""
    ENTITIES_EXTRACTED.labels(kind=kind).inc()


def record_rejection(kind: str, reason: str) -> None:
    """Increment the rejected-candidate counter for *kind* / *reason*."""
    CANDIDATES_REJECTED.labels(kind=kind, reason=reason).inc()


@contextmanager
def timed_extraction() -> Generator[None, None, None]:
    """
    Context manager that records extraction latency.

    Usage::

        with timed_extraction():
            entities = extract_entities(text)
    """
    with EXTRACTION_LATENCY.time():
        yield
