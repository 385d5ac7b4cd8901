"""Diff Parser - Per-file line counts from a unified git diff."""

from dataclasses import dataclass
import re

_HEADER_RE = re.compile(r'^diff --git a/(.+?) b/(.+)$')


@dataclass(frozen=True)
class FileDiff:
    """Added/removed line counts for one file in a diff."""
    path: str
    additions: int
    deletions: int

    @property
    def total_changes(self) -> int:
        return self.additions + self.deletions


def parse_diff(diff: str) -> list[FileDiff]:
    """Split a unified diff by file and count +/- lines.

    The path is taken from the b/ side of the header. Files whose section
    has no added or removed lines (mode changes, binaries) are dropped.
    """
    files = []
    current_path = None
    additions = deletions = 0

    def flush():
        if current_path is None:
            return
        file_diff = FileDiff(path=current_path, additions=additions, deletions=deletions)
        if file_diff.total_changes:
            files.append(file_diff)

    for line in diff.split('\n'):
        if line.startswith('diff --git'):
            flush()
            match = _HEADER_RE.match(line)
            current_path = match.group(2) if match else None
            additions = deletions = 0
        elif current_path is None:
            continue
        elif line.startswith('+') and not line.startswith('+++'):
            additions += 1
        elif line.startswith('-') and not line.startswith('---'):
            deletions += 1

    flush()
    return files
