"""CLI Main Entry Point"""

import os
import sys
import time

from commit_gen import ExternalToolError
from commit_gen.analysis import AnalysisOptions, AnalysisPipeline, no_changes_message, summarize_diff
from commit_gen.config import load_config
from commit_gen.git import GitAnalyzer, parse_diff
from commit_gen.llm import get_client
from commit_gen.prompts import PromptBuilder, PromptConfig
from commit_gen.output import success, warning, info, dim, bold, print_error, print_banner, print_report, CHECK, Spinner, colorize_commit_type

from commit_gen.cli.args import parse_args
from commit_gen.cli.commands import display_config, run_init_config, run_install_completion
from commit_gen.cli.utils import clean_commit_message, copy_to_clipboard


def _generate_message(client, prompt, timings):
    """Run text generation with spinner and return response."""
    t_gen = time.time()
    with Spinner():
        response = client.generate(prompt)
    timings['generate'] = time.time() - t_gen
    return response


def _display_message(message):
    """Display commit message with horizontal rules and colored type."""
    colored = colorize_commit_type(message)
    lines = colored.split('\n')
    # Use raw message for width calculation (no ANSI codes)
    raw_lines = message.split('\n')
    width = max((len(line) for line in raw_lines), default=40)
    print(f"\n{dim('─' * width)}")
    print(bold(lines[0]))
    for line in lines[1:]:
        print(line)
    print(dim('─' * width))


def _copy_and_report(message, no_copy):
    """Copy message to clipboard and print result."""
    if no_copy:
        return
    copied, reason = copy_to_clipboard(message)
    if copied:
        print(f"{success(CHECK)} Copied to clipboard!")
    else:
        print(f"{warning('!')} Could not copy to clipboard{': ' + reason if reason else ''}")
        print(dim("  Select the message above to copy manually."))


def _handle_subcommands(args):
    """Handle subcommands that exit early.

    Returns:
        tuple: (exit_code, should_exit) - exit_code if should_exit is True
    """
    if args.install_completion:
        return run_install_completion(), True
    if args.display_config:
        return display_config(), True
    if args.init_config:
        return run_init_config(), True
    return 0, False


def _get_provider_and_model(args, config):
    """Resolve provider and model from args, env, or config.

    Precedence: CLI args > environment variables > config file
    """
    provider = args.provider or os.environ.get('CG_PROVIDER') or config.provider
    model = args.model or os.environ.get('CG_MODEL') or config.model
    return provider, model


def _print_verbose_stats(args, prompt, response, timings):
    """Print verbose timing and token statistics."""
    if not args.verbose:
        return
    print(dim(f"  Prompt: ~{len(prompt)//4} tokens ({len(prompt)} chars)"))
    if response.tokens_used:
        print(dim(f"  Response: {response.tokens_used} tokens"))
    print(dim(f"  Timings: git={timings['git']:.2f}s, analysis={timings['analysis']:.2f}s, generate={timings.get('generate', 0):.2f}s"))


def _print_offline_summary(analyzer, options):
    """--no-ai: follow the report with a message built from staged line counts."""
    summary = summarize_diff(parse_diff(analyzer.get_staged_diff()), options)
    if summary:
        print(summary)


def _generate_commit_flow(args, config):
    """Main flow: list changes, build the report, optionally generate a message.

    Returns:
        int: Exit code
    """
    is_pipe = not sys.stdout.isatty()
    options = AnalysisOptions(
        commit_type=args.type or config.commit_type,
        language=args.language or config.language,
    )
    timings = {}

    t0 = time.time()
    analyzer = GitAnalyzer()
    changes = analyzer.get_changes()
    timings['git'] = time.time() - t0

    if changes.is_empty:
        print(no_changes_message(options))
        return 0

    t0 = time.time()
    report = AnalysisPipeline().build(changes, options)
    timings['analysis'] = time.time() - t0

    if not is_pipe:
        print_banner()

    if args.no_ai:
        print_report(report)
        _print_offline_summary(analyzer, options)
        return 0

    if args.verbose:
        print_report(report)

    # Prefer the staged diff; fall back to the report when nothing is staged
    diff = analyzer.get_staged_diff()
    body = diff if diff.strip() else report
    prompt = PromptBuilder().build(body, PromptConfig(
        commit_type=options.commit_type,
        hint=args.hint,
        language=options.language,
    ))

    provider, model = _get_provider_and_model(args, config)
    client = get_client(provider=provider, model=model, command=args.command or config.command)
    if not is_pipe:
        print(f"Analyzing {bold(str(len(changes)))} files using {info(client.name)}... ", end='', flush=True)

    response = _generate_message(client, prompt, timings)
    message = clean_commit_message(response.content)

    if is_pipe:
        print(message)
        _print_verbose_stats(args, prompt, response, timings)
        return 0

    print(success("done!"))
    _print_verbose_stats(args, prompt, response, timings)
    _display_message(message)
    _copy_and_report(message, args.no_copy)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    try:
        exit_code, should_exit = _handle_subcommands(args)
        if should_exit:
            return exit_code

        config = load_config()
        return _generate_commit_flow(args, config)
    except ExternalToolError as e:
        print_error(str(e))
        return 1
    except KeyboardInterrupt:
        print_error("Interrupted")
        return 130
    except Exception as e:
        print_error(f"Error: {e}")
        return 1


def run() -> None:
    sys.exit(main())
