"""Host-facing analysis orchestration with logging, metrics and tracing."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from rhyme_analyzer.core import AnalysisResult, AnalyzerConfig, RhymeAnalyzer
from rhyme_analyzer.core.config import resolve_config
from rhyme_analyzer.utils.observability import (
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)
from rhyme_analyzer.utils.telemetry import StructuredTelemetry

from .result_formatter import AnalysisResultFormatter

ConfigLike = AnalyzerConfig | Mapping[str, Any] | None


class AnalysisService:
    """Entry point for editors, CLIs and other hosts.

    Wraps one :class:`RhymeAnalyzer` so that repeated requests share its
    phoneme cache, and records every request as a telemetry trace.
    """

    def __init__(
        self,
        analyzer: Optional[RhymeAnalyzer] = None,
        *,
        config: ConfigLike = None,
        formatter: Optional[AnalysisResultFormatter] = None,
        telemetry: Optional[StructuredTelemetry] = None,
    ) -> None:
        self.analyzer = analyzer or RhymeAnalyzer(config)
        if analyzer is not None and config is not None:
            self.analyzer.config = resolve_config(config)
        self.formatter = formatter or AnalysisResultFormatter()
        self.telemetry = telemetry or StructuredTelemetry()
        self._latest_trace: Dict[str, Any] = {}

        self._logger = get_logger(__name__).bind(component="analysis_service")

        self._metric_request_total = create_counter(
            "rhyme_analyzer_requests_total",
            "Total analysis requests received.",
        )
        self._metric_request_failures = create_counter(
            "rhyme_analyzer_requests_failed_total",
            "Total analysis requests that raised an exception.",
        )
        self._metric_request_duration = create_histogram(
            "rhyme_analyzer_request_seconds",
            "Latency of analysis requests.",
        )

    @property
    def config(self) -> AnalyzerConfig:
        return self.analyzer.config

    def update_config(self, config: ConfigLike) -> AnalyzerConfig:
        self.analyzer.config = resolve_config(config)
        self._logger.info("Configuration updated", context=self.analyzer.config.as_dict())
        return self.analyzer.config

    def latest_trace(self) -> Dict[str, Any]:
        return dict(self._latest_trace)

    def analyze(self, text: Optional[str], config: ConfigLike = None) -> AnalysisResult:
        text = text or ""
        settings = resolve_config(config, self.analyzer.config)
        request_context = {
            "characters": len(text),
            "lines": text.count("\n") + 1 if text else 0,
        }

        telemetry = self.telemetry
        telemetry.start_trace("analyze")
        telemetry.increment("analysis.invoked")
        telemetry.annotate("input.characters", request_context["characters"])
        telemetry.annotate("input.config", settings.as_dict())

        self._metric_request_total.inc()

        if not text.strip():
            self._logger.info("Nothing to analyze", context=request_context)
            telemetry.increment("analysis.empty")
            self._latest_trace = telemetry.snapshot()
            return AnalysisResult.empty()

        self._logger.info("Analysis request received", context=request_context)

        with start_span("rhyme.analyze", request_context) as span:
            try:
                with self._metric_request_duration.time():
                    result = self.analyzer.analyze(text, settings, telemetry=telemetry)
            except Exception as exc:
                failure_context = dict(request_context)
                failure_context["error"] = str(exc)
                self._metric_request_failures.inc()
                self._logger.error("Analysis request failed", context=failure_context)
                record_exception(span, exc)
                telemetry.increment("analysis.failed")
                self._latest_trace = telemetry.snapshot()
                raise

            counts = {
                "tokens": len(result.tokens),
                "spans": len(result.spans),
                "rhyme_groups": len(result.rhyme_groups),
                "assonance_clusters": len(result.assonance_clusters),
            }
            self._logger.info(
                "Analysis request completed",
                context={"result_counts": counts, "scheme": "".join(result.scheme)},
            )
            telemetry.annotate("result.counts", counts)
            telemetry.increment("analysis.completed")
            self._latest_trace = telemetry.snapshot()

            add_span_attributes(
                span,
                {
                    "analysis.success": True,
                    "result.rhyme_groups": counts["rhyme_groups"],
                    "result.scheme": " ".join(result.scheme),
                },
            )
            return result

    def export_json(self, text: Optional[str], config: ConfigLike = None, *, indent: int = 2) -> str:
        return self.analyze(text, config).to_json(indent=indent)

    def render_report(self, text: Optional[str], config: ConfigLike = None) -> str:
        settings = resolve_config(config, self.analyzer.config)
        result = self.analyze(text, settings)
        return self.formatter.format_result(result, show_assonance=settings.assonance_enabled)


__all__ = ["AnalysisService"]
