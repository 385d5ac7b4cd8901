"""Analysis Pipeline - Run every strategy over a ChangeSet and join the results."""

from dataclasses import dataclass

from commit_gen.analysis.labels import get_labels
from commit_gen.analysis.strategies import AnalysisOptions, AnalysisStrategy, STRATEGIES
from commit_gen.git.analyzer import ChangeSet


@dataclass(frozen=True)
class AnalysisReport:
    """Text produced by one strategy."""
    strategy: str
    text: str


class AnalysisPipeline:
    """Runs strategies in registration order. No strategy sees another's output."""

    def __init__(self, strategies: list[AnalysisStrategy] | None = None):
        if strategies is None:
            strategies = [strategy_class() for strategy_class in STRATEGIES]
        self.strategies = list(strategies)

    def reports(self, changes: ChangeSet, options: AnalysisOptions | None = None) -> list[AnalysisReport]:
        options = options or AnalysisOptions()
        return [
            AnalysisReport(strategy=strategy.name, text=strategy.analyze(changes, options))
            for strategy in self.strategies
        ]

    def build(self, changes: ChangeSet, options: AnalysisOptions | None = None) -> str:
        """Main entry point: ChangeSet -> full report text."""
        return ''.join(report.text for report in self.reports(changes, options))


def no_changes_message(options: AnalysisOptions | None = None) -> str:
    """Fixed line shown instead of a report when nothing has changed."""
    options = options or AnalysisOptions()
    return f"{options.commit_type}: {get_labels(options.language)['no_changes']}"
