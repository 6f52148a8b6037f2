"""Mode orchestration: options in, analysis result out."""

from .modes import (
    AggregateMode,
    AnalysisResult,
    Mode,
    OwnershipMode,
    PeriodicMode,
    build_modes,
)
from .options import AnalyzerOptions, build_log_query, resolve_options
from .orchestrator import analyze_contributions

__all__ = [
    "AggregateMode",
    "AnalysisResult",
    "AnalyzerOptions",
    "Mode",
    "OwnershipMode",
    "PeriodicMode",
    "analyze_contributions",
    "build_log_query",
    "build_modes",
    "resolve_options",
]
