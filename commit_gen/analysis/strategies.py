"""Analysis Strategies - Turn a ChangeSet into report sections."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from commit_gen.analysis.labels import DEFAULT_LANGUAGE, describe_status, get_labels
from commit_gen.git.analyzer import ChangeSet, ROOT_DIR


@dataclass
class AnalysisOptions:
    """Per-run settings shared by every strategy."""
    commit_type: str = "feat"
    language: str = DEFAULT_LANGUAGE


class AnalysisStrategy(ABC):
    """A pure ChangeSet -> text transform. Must not fail on an empty ChangeSet."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def analyze(self, changes: ChangeSet, options: AnalysisOptions | None = None) -> str:
        pass


class FileListStrategy(AnalysisStrategy):
    """Numbered list of every changed file with its status."""

    @property
    def name(self) -> str:
        return "file_list"

    def analyze(self, changes: ChangeSet, options: AnalysisOptions | None = None) -> str:
        options = options or AnalysisOptions()
        labels = get_labels(options.language)

        lines = [f"{labels['file_list_header']}\n"]
        for index, record in enumerate(changes, 1):
            prefix = '' if record.directory == ROOT_DIR else f"{record.directory}/"
            status = describe_status(record.status, options.language)
            lines.append(f"{index}. {prefix}{record.basename} ({status})\n")
        return ''.join(lines)


class DirectorySummaryStrategy(AnalysisStrategy):
    """Files grouped under their directory, directories in first-seen order."""

    @property
    def name(self) -> str:
        return "directory_summary"

    def analyze(self, changes: ChangeSet, options: AnalysisOptions | None = None) -> str:
        options = options or AnalysisOptions()
        labels = get_labels(options.language)

        lines = [f"\n{labels['directory_header']}\n"]
        for directory, names in self._group_by_directory(changes).items():
            label = labels['root'] if directory == ROOT_DIR else directory
            lines.append(f"\n{label}/ ({len(names)} {labels['directory_unit']}):\n")
            lines.extend(f"  - {name}\n" for name in names)
        return ''.join(lines)

    def _group_by_directory(self, changes: ChangeSet) -> dict[str, list[str]]:
        groups: dict[str, list[str]] = {}
        for record in changes:
            groups.setdefault(record.directory, []).append(record.basename)
        return groups


class TypeSummaryStrategy(AnalysisStrategy):
    """How many files carry each status code."""

    @property
    def name(self) -> str:
        return "type_summary"

    def analyze(self, changes: ChangeSet, options: AnalysisOptions | None = None) -> str:
        options = options or AnalysisOptions()
        labels = get_labels(options.language)

        lines = [f"\n{labels['type_header']}\n"]
        for status, count in self._count_statuses(changes).items():
            description = describe_status(status, options.language)
            lines.append(f"- {count} {labels['type_unit']} {description}\n")
        return ''.join(lines)

    def _count_statuses(self, changes: ChangeSet) -> dict[str, int]:
        counts: dict[str, int] = {}
        for record in changes:
            counts[record.status] = counts.get(record.status, 0) + 1
        return counts


# Run order is fixed: file list, directory summary, type summary
STRATEGIES = [
    FileListStrategy,
    DirectorySummaryStrategy,
    TypeSummaryStrategy,
]
