"""Terminal Output - colors, status lines, the change report and a spinner."""

import itertools
import os
import re
import sys
import threading

from commit_gen.analysis.labels import LABELS

RESET = '\033[0m'
STYLES = {
    'bold': '\033[1m',
    'dim': '\033[2m',
    'red': '\033[31m',
    'green': '\033[32m',
    'yellow': '\033[33m',
    'magenta': '\033[35m',
    'cyan': '\033[36m',
}


def _color_wanted() -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    isatty = getattr(sys.stdout, 'isatty', None)
    return bool(isatty and isatty())


def _unicode_wanted() -> bool:
    encoding = getattr(sys.stdout, 'encoding', None) or 'utf-8'
    try:
        '✓✗─⠋'.encode(encoding)
        return True
    except (UnicodeEncodeError, LookupError):
        return False


COLORS_ENABLED = _color_wanted()
UNICODE_ENABLED = _unicode_wanted()

CHECK = '✓' if UNICODE_ENABLED else '[OK]'
CROSS = '✗' if UNICODE_ENABLED else '[X]'

BANNER = """\
 #####  ####### #     # #     # ### #######     #####  ####### #     #
#     # #     # ##   ## ##   ##  #     #       #     # #       ##    #
#       #     # # # # # # # # #  #     #       #       #       # #   #
#       #     # #  #  # #  #  #  #     #       #  #### #####   #  #  #
#       #     # #     # #     #  #     #       #     # #       #   # #
#     # #     # #     # #     #  #     #       #     # #       #    ##
 #####  ####### #     # #     # ###    #        #####  ####### #     #"""


def style(text: str, *names: str) -> str:
    """Wrap text in the named ANSI styles; plain text when colors are off."""
    if not COLORS_ENABLED:
        return text
    return ''.join(STYLES[name] for name in names) + text + RESET


def success(text: str) -> str:
    return style(text, 'green')


def error(text: str) -> str:
    return style(text, 'red')


def warning(text: str) -> str:
    return style(text, 'yellow')


def info(text: str) -> str:
    return style(text, 'cyan')


def dim(text: str) -> str:
    return style(text, 'dim')


def bold(text: str) -> str:
    return style(text, 'bold')


def print_success(message: str) -> None:
    print(f"{success(CHECK)} {message}")


def print_error(message: str) -> None:
    print(f"{error(CROSS)} {error(message)}", file=sys.stderr)


def print_banner() -> None:
    print(info(BANNER))
    print()


# ---------------------------------------------------------------------------
# Change report
# ---------------------------------------------------------------------------

REPORT_HEADERS = frozenset(
    labels[key]
    for labels in LABELS.values()
    for key in ('file_list_header', 'directory_header', 'type_header')
)

# "src/ (2 arquivo(s)):" as emitted by the directory summary
_DIRECTORY_LINE_RE = re.compile(r'^\S.*/ \(\d+ .+\):$')
_BULLET_PREFIX = '  - '


def format_report(report: str) -> str:
    """Highlight section headers and directory groups, dim per-file bullets."""
    styled = []
    for line in report.split('\n'):
        if line in REPORT_HEADERS:
            line = style(line, 'bold', 'cyan')
        elif _DIRECTORY_LINE_RE.match(line):
            line = bold(line)
        elif line.startswith(_BULLET_PREFIX):
            line = dim(line)
        styled.append(line)
    return '\n'.join(styled)


def print_report(report: str) -> None:
    print(format_report(report), end='' if report.endswith('\n') else '\n')


# ---------------------------------------------------------------------------
# Commit messages
# ---------------------------------------------------------------------------

COMMIT_TYPE_STYLES = {
    'feat': 'green',
    'fix': 'red',
    'refactor': 'yellow',
    'docs': 'cyan',
    'test': 'magenta',
    'perf': 'green',
    'chore': 'dim',
    'style': 'dim',
    'ci': 'cyan',
    'build': 'cyan',
}

_TYPE_PREFIX_RE = re.compile(r'^(\w+)(\([^)]*\))?!?:')


def colorize_commit_type(message: str) -> str:
    """Color the `type(scope):` prefix on the subject line."""
    subject, sep, body = message.partition('\n')
    match = _TYPE_PREFIX_RE.match(subject)
    if not match or match.group(1) not in COMMIT_TYPE_STYLES:
        return message
    prefix = match.group(0)
    subject = style(prefix, 'bold', COMMIT_TYPE_STYLES[match.group(1)]) + subject[len(prefix):]
    return subject + sep + body


class Spinner:
    """Animates a spinner on a TTY while the wrapped block runs."""

    INTERVAL = 0.08

    def __init__(self, stream=None):
        self._stream = stream or sys.stdout
        self._frames = '⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏' if UNICODE_ENABLED else '-\\|/'
        self._done = threading.Event()
        self._thread = None

    def _run(self):
        for frame in itertools.cycle(self._frames):
            if self._done.is_set():
                break
            self._stream.write(f'\r\033[K{frame} ')
            self._stream.flush()
            self._done.wait(self.INTERVAL)

    def __enter__(self):
        if self._stream.isatty():
            self._thread = threading.Thread(target=self._run, daemon=True)
            self._thread.start()
        return self

    def __exit__(self, *exc):
        self._done.set()
        if self._thread:
            self._thread.join()
            self._stream.write('\r\033[K')
            self._stream.flush()
        return False


__all__ = [
    "STYLES", "COLORS_ENABLED", "UNICODE_ENABLED",
    "CHECK", "CROSS", "BANNER", "REPORT_HEADERS",
    "style", "success", "error", "warning", "info", "dim", "bold",
    "print_success", "print_error", "print_banner",
    "format_report", "print_report",
    "colorize_commit_type", "Spinner", "COMMIT_TYPE_STYLES",
]
