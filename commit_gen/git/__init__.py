"""Git Operations Package"""

from commit_gen.git.analyzer import (
    GitAnalyzer,
    GitError,
    ChangeRecord,
    ChangeSet,
    StatusKind,
    parse_status,
    ROOT_DIR,
)
from commit_gen.git.diff_parser import FileDiff, parse_diff

__all__ = [
    "GitAnalyzer",
    "GitError",
    "ChangeRecord",
    "ChangeSet",
    "StatusKind",
    "parse_status",
    "ROOT_DIR",
    "FileDiff",
    "parse_diff",
]
