"""
observability.py
================

Does: Define the collector protocol that receives timed pipeline events
      (availability checks, generation attempts, analysis) plus two
      implementations: a no-op one and an in-memory recorder for tests/CLI.
Returns: ObservabilityCollector, NullCollector, InMemoryCollector, ObservationEvent.
Used by: PaletteOrchestrator (passed explicitly; there is no global collector).
"""

from __future__ import annotations

import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

__all__ = [
    "ObservationEvent",
    "ObservabilityCollector",
    "NullCollector",
    "InMemoryCollector",
]
__docformat__ = "google"


@dataclass(frozen=True)
class ObservationEvent:
    """One recorded pipeline event."""

    name: str
    duration_ms: float | None = None
    ok: bool = True
    attrs: dict[str, Any] = field(default_factory=dict)


@runtime_checkable
class ObservabilityCollector(Protocol):
    def record(self, name: str, *, ok: bool = True, duration_ms: float | None = None, **attrs: Any) -> None: ...

    def timed(self, name: str, **attrs: Any) -> Any: ...


class NullCollector:
    """Does: Accept every event and drop it."""

    def record(self, name: str, *, ok: bool = True, duration_ms: float | None = None, **attrs: Any) -> None:
        return None

    @contextmanager
    def timed(self, name: str, **attrs: Any) -> Iterator[dict[str, Any]]:
        yield attrs


class InMemoryCollector:
    """Does: Keep events in a list, in arrival order.

    `timed()` yields a mutable attrs dict so the block can add details
    (e.g. `attrs["available"] = True`); an exception escaping the block is
    recorded with ok=False and re-raised.
    """

    def __init__(self) -> None:
        self.events: list[ObservationEvent] = []

    def record(self, name: str, *, ok: bool = True, duration_ms: float | None = None, **attrs: Any) -> None:
        self.events.append(ObservationEvent(name=name, duration_ms=duration_ms, ok=ok, attrs=dict(attrs)))

    @contextmanager
    def timed(self, name: str, **attrs: Any) -> Iterator[dict[str, Any]]:
        start = time.perf_counter()
        ok = True
        try:
            yield attrs
        except BaseException:
            ok = False
            raise
        finally:
            elapsed = (time.perf_counter() - start) * 1000.0
            self.record(name, ok=ok, duration_ms=elapsed, **attrs)

    def names(self) -> list[str]:
        return [e.name for e in self.events]

    def clear(self) -> None:
        self.events.clear()
