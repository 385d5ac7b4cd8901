"""Change Analysis Package"""

from commit_gen.analysis.labels import LABELS, LANGUAGES, DEFAULT_LANGUAGE, get_labels, describe_status
from commit_gen.analysis.strategies import (
    AnalysisOptions,
    AnalysisStrategy,
    FileListStrategy,
    DirectorySummaryStrategy,
    TypeSummaryStrategy,
    STRATEGIES,
)
from commit_gen.analysis.pipeline import AnalysisPipeline, AnalysisReport, no_changes_message
from commit_gen.analysis.diff_summary import summarize_diff

__all__ = [
    "LABELS",
    "LANGUAGES",
    "DEFAULT_LANGUAGE",
    "get_labels",
    "describe_status",
    "AnalysisOptions",
    "AnalysisStrategy",
    "FileListStrategy",
    "DirectorySummaryStrategy",
    "TypeSummaryStrategy",
    "STRATEGIES",
    "AnalysisPipeline",
    "AnalysisReport",
    "no_changes_message",
    "summarize_diff",
]
