"""Git Analyzer - List working-tree changes from git."""

import re
import subprocess
from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePosixPath

from commit_gen import ExternalToolError

ROOT_DIR = '.'


class StatusKind(Enum):
    """Known porcelain status codes."""
    MODIFIED = 'M'
    ADDED = 'A'
    DELETED = 'D'
    RENAMED = 'R'
    UNTRACKED = '??'
    OTHER = ''


_KINDS_BY_CODE = {kind.value: kind for kind in StatusKind if kind is not StatusKind.OTHER}


@dataclass(frozen=True)
class ChangeRecord:
    """One changed file as reported by `git status --porcelain`."""
    status: str
    path: str

    @property
    def kind(self) -> StatusKind:
        return _KINDS_BY_CODE.get(self.status, StatusKind.OTHER)

    @property
    def directory(self) -> str:
        """POSIX dirname of the path, '.' when the file sits at the root."""
        parent = str(PurePosixPath(self.path).parent)
        return parent or ROOT_DIR

    @property
    def basename(self) -> str:
        return PurePosixPath(self.path).name


@dataclass(frozen=True)
class ChangeSet:
    """Changed files in the order git reported them. Duplicates are allowed."""
    records: tuple[ChangeRecord, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, *pairs: tuple[str, str]) -> 'ChangeSet':
        return cls(records=tuple(ChangeRecord(status=s, path=p) for s, p in pairs))

    def __iter__(self):
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    @property
    def is_empty(self) -> bool:
        return len(self.records) == 0


class GitError(ExternalToolError):
    """Raised when git operations fail."""
    pass


# git wraps paths holding spaces, quotes or control bytes in C-style quotes
_QUOTED_RE = re.compile(r'"((?:[^"\\]|\\.)*)"')
_ESCAPE_RE = re.compile(r'\\([0-7]{3})|\\(.)|([^\\]+)', re.DOTALL)
_ESCAPES = {
    'a': b'\a', 'b': b'\b', 't': b'\t', 'n': b'\n',
    'v': b'\v', 'f': b'\f', 'r': b'\r',
}


def _unquote_token(body: str) -> str:
    raw = bytearray()
    for octal, escaped, literal in _ESCAPE_RE.findall(body):
        if octal:
            raw.append(int(octal, 8))
        elif escaped:
            raw += _ESCAPES.get(escaped, escaped.encode('utf-8'))
        else:
            raw += literal.encode('utf-8')
    return raw.decode('utf-8', errors='replace')


def unquote_path(path: str) -> str:
    """Undo git's quoting on each quoted side of a porcelain path."""
    return _QUOTED_RE.sub(lambda m: _unquote_token(m.group(1)), path)


def parse_status(output: str) -> ChangeSet:
    """Parse `git status --porcelain` output into a ChangeSet.

    Each line is a two-character status column, a space, then the path.
    Blank lines are skipped; anything else that doesn't fit raises GitError.
    """
    records = []
    for line in output.split('\n'):
        if not line.strip():
            continue
        if len(line) < 4 or line[2] != ' ':
            raise GitError(f"Unexpected git status line: {line!r}")
        status = line[:2].strip()
        path = unquote_path(line[3:].strip())
        if not status or not path:
            raise GitError(f"Unexpected git status line: {line!r}")
        records.append(ChangeRecord(status=status, path=path))
    return ChangeSet(records=tuple(records))


class GitAnalyzer:
    """Reads working-tree state from git."""

    def __init__(self):
        self._verify_git_available()
        self._verify_in_repo()

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout."""
        try:
            result = subprocess.run(
                ['git', *args],
                capture_output=True,
                text=True,
                check=True,
                encoding='utf-8',
                errors='replace'
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            raise GitError(f"Git command failed: git {' '.join(args)}\n{e.stderr}")
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")

    def _verify_git_available(self) -> None:
        """Fail fast if git isn't available."""
        try:
            self._run_git('--version')
        except GitError:
            raise GitError("Git is not installed or not in PATH")

    def _verify_in_repo(self) -> None:
        """Fail fast if we're not in a git repository."""
        try:
            self._run_git('rev-parse', '--git-dir')
        except GitError:
            raise GitError("Not inside a git repository")

    def get_changes(self) -> ChangeSet:
        """Every file with uncommitted changes, staged or not."""
        return parse_status(
            self._run_git('-c', 'core.quotePath=false', 'status', '--porcelain')
        )

    def get_staged_diff(self) -> str:
        """Get the actual diff content for staged changes."""
        return self._run_git('diff', '--staged')
