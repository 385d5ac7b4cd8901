"""
Commit Gen

Summarize working-tree changes and draft commit messages from them.
"""

__version__ = "1.0.0"

# Centralized commit types - single source of truth
# Used by: prompts/builder.py, cli/args.py (argparse), cli/utils.py (cleanup)
COMMIT_TYPES = {
    'feat': 'A new feature or capability',
    'fix': 'A bug fix',
    'refactor': 'Code restructuring without behavior change',
    'chore': 'Maintenance tasks, dependencies, tooling',
    'docs': 'Documentation only changes',
    'test': 'Adding or updating tests',
    'style': 'Formatting, whitespace, no code change',
    'perf': 'Performance improvement',
    'ci': 'CI/CD configuration changes',
    'build': 'Build system or external dependency changes',
}

COMMIT_TYPE_NAMES = list(COMMIT_TYPES.keys())


class ExternalToolError(Exception):
    """Raised when an external process (git, a text generator) fails or is missing."""
    pass
