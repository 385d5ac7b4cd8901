"""CLI Utility Functions"""

import re
import subprocess
import sys

from commit_gen import COMMIT_TYPE_NAMES

TYPES_PATTERN = '|'.join(COMMIT_TYPE_NAMES)

# Trailing output that is never part of a commit message
JUNK_PATTERNS = re.compile(r'^(diff --git |@@\s|[+-]{3}\s[ab]/|index [0-9a-f]|```)')


def clean_commit_message(text: str) -> str:
    """Clean up generator output to extract just the commit message."""
    lines = text.strip().split('\n')
    start_idx = 0
    for i, line in enumerate(lines):
        if re.match(rf'^[`\s]*({TYPES_PATTERN})[\(!:]', line):
            start_idx = i
            break

    end_idx = len(lines)
    for i in range(start_idx + 1, len(lines)):
        if JUNK_PATTERNS.match(lines[i]):
            end_idx = i
            break

    cleaned = '\n'.join(lines[start_idx:end_idx]).rstrip()
    lines = cleaned.split('\n')
    lines[0] = lines[0].strip('`').strip()

    return '\n'.join(lines)


def copy_to_clipboard(text: str) -> tuple[bool, str]:
    """Copy text to clipboard. Returns (success, failure_reason)."""
    try:
        if sys.platform == 'win32':
            subprocess.run(['clip'], input=text.encode('utf-8'), check=True)
        elif sys.platform == 'darwin':
            subprocess.run(['pbcopy'], input=text.encode('utf-8'), check=True)
        else:
            try:
                subprocess.run(['xclip', '-selection', 'clipboard'], input=text.encode('utf-8'), check=True)
            except FileNotFoundError:
                subprocess.run(['xsel', '--clipboard', '--input'], input=text.encode('utf-8'), check=True)
        return True, ""
    except FileNotFoundError:
        if sys.platform == 'linux':
            return False, "Install xclip or xsel: sudo apt install xclip"
        return False, "No clipboard tool found"
    except (subprocess.CalledProcessError, OSError) as e:
        return False, f"Clipboard command failed: {e}"
