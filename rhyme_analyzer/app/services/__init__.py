"""Services exposed to analysis hosts."""

from .analysis_service import AnalysisService
from .result_formatter import AnalysisResultFormatter

__all__ = ["AnalysisService", "AnalysisResultFormatter"]
