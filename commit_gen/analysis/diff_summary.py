"""Offline commit summary built from diff line counts, no model involved."""

from commit_gen.analysis.labels import get_labels
from commit_gen.analysis.strategies import AnalysisOptions
from commit_gen.git.diff_parser import FileDiff


def summarize_diff(files: list[FileDiff], options: AnalysisOptions | None = None) -> str:
    """One-line message listing each file with its added/removed counts.

    Returns an empty string when there is nothing to summarize.
    """
    if not files:
        return ""
    options = options or AnalysisOptions()
    labels = get_labels(options.language)
    parts = [
        f"{labels['changes_in']} {f.path} ({f.additions} {labels['additions']}, {f.deletions} {labels['deletions']})"
        for f in files
    ]
    return f"{options.commit_type}: " + "; ".join(parts)
