# Copyright (c) MFNav.
# SPDX-License-Identifier: MIT
"""Fund data observability helpers and Prometheus metrics.

Exports
-------
Collectors (names are part of the public contract):

* ``mfnav_upstream_latency_seconds`` (Histogram; labels ``provider``, ``outcome``)
* ``mfnav_upstream_errors_total`` (Counter; labels ``provider``, ``reason``)

Helpers:

* :func:`observe_upstream_request`: context manager wrapping one upstream call.

Design
------
Collectors are created against the *current* default registry
(:data:`prometheus_client.REGISTRY`). If a collector with the same name is
already registered (module re-import under test), it is reused instead of
registering a duplicate.
"""

from __future__ import annotations

from collections.abc import Generator, Sequence
from contextlib import contextmanager, suppress
from dataclasses import dataclass, field
from time import perf_counter

import prometheus_client as prom
from prometheus_client import Counter, Histogram
from prometheus_client.registry import CollectorRegistry


def _get_or_create_histogram(
    name: str,
    doc: str,
    labelnames: Sequence[str] | None = None,
) -> Histogram:
    """Return a histogram bound to the current default registry (idempotent)."""
    registry: CollectorRegistry = prom.REGISTRY
    mapping = getattr(registry, "_names_to_collectors", {})
    existing = mapping.get(name)
    if isinstance(existing, Histogram):
        return existing

    labels = tuple(labelnames) if labelnames is not None else ()
    try:
        return Histogram(name, doc, labels, registry=registry)
    except ValueError as exc:
        if "Duplicated timeseries" in str(exc):
            again = getattr(registry, "_names_to_collectors", {}).get(name)
            if isinstance(again, Histogram):
                return again
        raise


def _get_or_create_counter(
    name: str,
    doc: str,
    labelnames: Sequence[str] | None = None,
) -> Counter:
    """Return a counter bound to the current default registry (idempotent).

    Note that ``prometheus_client`` registers counters under both ``name`` and
    ``name`` without the ``_total`` suffix; either lookup finds the collector.
    """
    registry: CollectorRegistry = prom.REGISTRY
    mapping = getattr(registry, "_names_to_collectors", {})
    existing = mapping.get(name) or mapping.get(name.removesuffix("_total"))
    if isinstance(existing, Counter):
        return existing

    labels = tuple(labelnames) if labelnames is not None else ()
    try:
        return Counter(name, doc, labels, registry=registry)
    except ValueError as exc:
        if "Duplicated timeseries" in str(exc):
            mapping = getattr(registry, "_names_to_collectors", {})
            again = mapping.get(name) or mapping.get(name.removesuffix("_total"))
            if isinstance(again, Counter):
                return again
        raise


upstream_latency_seconds: Histogram = _get_or_create_histogram(
    "mfnav_upstream_latency_seconds",
    "Latency of upstream fund data calls (seconds).",
    labelnames=("provider", "outcome"),
)

upstream_errors_total: Counter = _get_or_create_counter(
    "mfnav_upstream_errors_total",
    "Total errors encountered when calling the upstream fund data provider.",
    labelnames=("provider", "reason"),
)


@dataclass
class UpstreamObservation:
    """State captured while observing an upstream call.

    Attributes:
        provider: Upstream provider identifier (for labelling).
        start: Monotonic start time in seconds.
        outcome: ``"success"`` or ``"error"``.
        error_reason: Short, machine-readable error reason if any.
    """

    provider: str
    start: float = field(default_factory=perf_counter)
    outcome: str = "success"
    error_reason: str | None = None

    def mark_error(self, reason: str) -> None:
        """Mark the upstream call as failed with a given reason."""
        self.outcome = "error"
        self.error_reason = reason


@contextmanager
def observe_upstream_request(*, provider: str) -> Generator[UpstreamObservation, None, None]:
    """Observe one upstream request.

    Records a latency sample and, when the call failed, increments the error
    counter. Exceptions raised inside the block propagate unchanged; if the
    caller did not mark an error reason, the exception class name is used.

    Args:
        provider: Upstream provider identifier (e.g. ``"mfapi"``).

    Yields:
        A mutable :class:`UpstreamObservation`.
    """
    obs = UpstreamObservation(provider=provider)
    try:
        yield obs
    except Exception as exc:
        if obs.error_reason is None:
            obs.mark_error(type(exc).__name__)
        raise
    finally:
        elapsed = perf_counter() - obs.start
        with suppress(Exception):
            upstream_latency_seconds.labels(provider=obs.provider, outcome=obs.outcome).observe(
                elapsed
            )
            if obs.error_reason is not None:
                upstream_errors_total.labels(provider=obs.provider, reason=obs.error_reason).inc()
