"""
Main entry point for spelling words with dice.

Usage:
    python -m src.main dice.txt words.txt
    python -m src.main dice.txt words.txt --config run.yaml --output results/run1.json --verbose
"""

import argparse
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import yaml

from .worddice import (
    RunConfig,
    RunResult,
    SpellResult,
    build_network,
    format_result,
    load_dice,
    load_words,
    render_network,
    save_run,
    spell_words,
)


def load_config(config_path: str) -> RunConfig:
    """Load run configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return RunConfig(**(data or {}))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Spell words with a pool of letter dice, one die per letter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example run.yaml:
  ignore_case: false
  strip_whitespace: false
  show_graph: false
        """
    )
    parser.add_argument(
        "dice",
        help="Path to the dice file (one die per line, its letters)"
    )
    parser.add_argument(
        "words",
        help="Path to the words file (one word per line)"
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the run record as JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress to stderr"
    )
    parser.add_argument(
        "--ignore-case",
        action="store_true",
        help="Match letters case-insensitively"
    )
    parser.add_argument(
        "--show-graph",
        action="store_true",
        help="Print the flow network built for each word"
    )
    return parser


def main(argv: Optional[list] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    config = RunConfig()
    if args.config:
        try:
            config = load_config(args.config)
        except Exception as e:
            print(f"Error loading config: {e}", file=sys.stderr)
            sys.exit(1)

    if args.ignore_case:
        config.ignore_case = True
    if args.show_graph:
        config.show_graph = True

    try:
        dice, issues = load_dice(args.dice, strip_whitespace=config.strip_whitespace)
    except Exception as e:
        print(f"Error loading dice: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        words = load_words(args.words, strip_whitespace=config.strip_whitespace)
    except Exception as e:
        print(f"Error loading words: {e}", file=sys.stderr)
        sys.exit(1)

    if args.verbose:
        print(f"Dice: {len(dice)} from {args.dice}", file=sys.stderr)
        print(f"Words: {len(words)} from {args.words}", file=sys.stderr)
        for issue in issues:
            print(f"⚠ line {issue.line}: {issue.message}", file=sys.stderr)
        print("-" * 40, file=sys.stderr)

    started_at = datetime.now()

    def on_word(result: SpellResult) -> None:
        if config.show_graph:
            print(f"Graph for word: {result.word}")
            print(render_network(build_network(dice, result.word, ignore_case=config.ignore_case)))
            print()
        print(format_result(result))
        if args.verbose:
            status = "✓" if result.spelled else "✗"
            print(f"{status} {result.word!r}: flow {result.flow}/{len(result.word)}", file=sys.stderr)

    try:
        results = spell_words(dice, words, ignore_case=config.ignore_case, on_word=on_word)
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 1

    ended_at = datetime.now()
    spelled = sum(1 for r in results if r.spelled)

    run = RunResult(
        config=config,
        dice=[d.faces for d in dice],
        results=results,
        issues=issues,
        spelled_count=spelled,
        failed_count=len(results) - spelled,
        started_at=started_at.isoformat(),
        ended_at=ended_at.isoformat(),
        duration_seconds=(ended_at - started_at).total_seconds(),
    )

    if args.output:
        save_run(run, args.output)
        if args.verbose:
            print(f"Results saved to: {args.output}", file=sys.stderr)

    if args.verbose:
        print(file=sys.stderr)
        print("=== Run Summary ===", file=sys.stderr)
        print(f"Spelled: {run.spelled_count}", file=sys.stderr)
        print(f"Cannot spell: {run.failed_count}", file=sys.stderr)
        print(f"Duration: {run.duration_seconds:.2f}s", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
