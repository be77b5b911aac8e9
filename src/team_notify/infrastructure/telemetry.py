"""Optional OpenTelemetry tracing for team-notify.

When ``opentelemetry-api`` and ``opentelemetry-sdk`` are installed (optional
dependency: ``pip install "team-notify[otel]"``) this module sets up a tracer
provider with the configured exporter and returns real OTEL spans.  Otherwise
every public function returns no-op objects.

Usage::

    from team_notify.infrastructure.telemetry import get_tracer

    with get_tracer().start_as_current_span("teams.diff") as span:
        span.set_attribute("teams.rev_end", rev_end)

Configuration (``TeamsConfig.telemetry``)::

    "telemetry": {"enabled": true, "exporter": "console"}
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from team_notify.config import TeamsConfig, TelemetryConfig

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# No-op shim (used when OTEL is not installed or telemetry is disabled)
# ---------------------------------------------------------------------------

class _NoOpSpan:
    """Minimal no-op span that satisfies the context-manager protocol."""

    def set_attribute(self, key: str, value: Any) -> None:  # noqa: ARG002
        pass

    def record_exception(self, exc: BaseException) -> None:  # noqa: ARG002
        pass

    def __enter__(self) -> "_NoOpSpan":
        return self

    def __exit__(self, *args: Any) -> None:
        pass


class _NoOpTracer:
    def start_as_current_span(self, name: str, **kwargs: Any) -> _NoOpSpan:  # noqa: ARG002
        return _NoOpSpan()


_NOOP_TRACER = _NoOpTracer()

_tracer: Any = None
_otel_available: bool = False

try:
    import opentelemetry  # noqa: F401
    _otel_available = True
except ImportError:
    pass


def _span_exporter(tel_cfg: "TelemetryConfig") -> Any:
    """The exporter named by TEL_CFG, or None when spans go nowhere."""
    if tel_cfg.exporter == "console":
        from opentelemetry.sdk.trace.export import ConsoleSpanExporter
        return ConsoleSpanExporter()
    if tel_cfg.exporter == "otlp":
        if not tel_cfg.otlp_endpoint:
            logger.warning("Telemetry exporter='otlp' but otlp_endpoint is not set; traces dropped")
            return None
        try:
            from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
        except ImportError:
            logger.warning(
                "OTLP exporter requested but 'opentelemetry-exporter-otlp-proto-grpc' is not installed"
            )
            return None
        return OTLPSpanExporter(endpoint=tel_cfg.otlp_endpoint)
    return None


def setup_telemetry(config: "TeamsConfig") -> None:
    """Install a tracer for ``config.telemetry``; later calls are no-ops.

    Nothing happens when telemetry is disabled or OTEL is not installed, and
    ``get_tracer()`` keeps returning the no-op tracer.
    """
    global _tracer  # noqa: PLW0603

    tel_cfg = config.telemetry
    if _tracer is not None or tel_cfg is None or not tel_cfg.enabled:
        return
    if not _otel_available:
        logger.warning("Telemetry enabled but opentelemetry-sdk is missing: pip install 'team-notify[otel]'")
        return

    from opentelemetry import trace
    from opentelemetry.sdk.resources import SERVICE_NAME, Resource
    from opentelemetry.sdk.trace import TracerProvider
    from opentelemetry.sdk.trace.export import BatchSpanProcessor

    provider = TracerProvider(resource=Resource(attributes={SERVICE_NAME: tel_cfg.service_name}))
    exporter = _span_exporter(tel_cfg)
    if exporter is not None:
        provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)
    _tracer = trace.get_tracer("team_notify")
    logger.debug("Tracing %s via %s exporter", tel_cfg.service_name, tel_cfg.exporter)


def get_tracer() -> Any:
    """Return the active tracer (real OTEL tracer or no-op)."""
    return _tracer if _tracer is not None else _NOOP_TRACER


def reset_for_testing() -> None:
    """Reset module state for use in tests. Not for production use."""
    global _tracer  # noqa: PLW0603
    _tracer = None
