"""CLI Argument Parsing"""

import argparse
import argcomplete

from commit_gen import COMMIT_TYPE_NAMES, __version__
from commit_gen.analysis.labels import LANGUAGES


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='commit-gen',
        description='Summarize working-tree changes and generate a commit message',
        epilog='Example: commit-gen -t fix --verbose'
    )

    parser.add_argument('-V', '--version', action='version', version=f'%(prog)s {__version__}')

    # Generation options
    parser.add_argument('-t', '--type', type=str, choices=COMMIT_TYPE_NAMES, help='Commit type (default: feat)')
    parser.add_argument('--hint', type=str, metavar='TEXT', help='Add context: --hint "fixing the login bug"')
    parser.add_argument('-l', '--language', type=str, choices=LANGUAGES, help='Report language (default: pt)')
    parser.add_argument('--no-ai', action='store_true', help='Print the change report only, no text generation')

    # Text generation options
    parser.add_argument('-p', '--provider', type=str, choices=['auto', 'ollama', 'claude', 'command'], help='Text generation provider')
    parser.add_argument('-m', '--model', type=str, metavar='MODEL', help='Model name')
    parser.add_argument('--command', type=str, metavar='CMD', help="Generator command for --provider command (default: 'claude -p')")

    # Output options
    parser.add_argument('--no-copy', action='store_true', help='Print message only, do not copy to clipboard')
    parser.add_argument('-v', '--verbose', action='store_true', help='Show the change report and debug info')

    # Setup/config
    parser.add_argument('--display-config', action='store_true', help='Show current configuration')
    parser.add_argument('--init-config', action='store_true', help='Write a .commitgenrc with current settings here')
    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
