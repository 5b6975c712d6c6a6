"""CLI entrypoint for the crossword layout search."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Dict, List

from wordcross.core.exceptions import WordListError
from wordcross.data.samples import SAMPLE_MIN_CROSSINGS, SAMPLE_WORD_LISTS
from wordcross.data.wordlist import parse_words_file
from wordcross.engine.generator import GeneratorConfig, LayoutGenerator, SearchMethod
from wordcross.utils.logger import configure_logging
from wordcross.utils.pretty import layout_to_jsonable, print_generation_stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Arrange a word list into crossing crossword layouts",
    )
    parser.add_argument("words", nargs="*", metavar="WORD", help="Words to place")
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one word per line (# comments and blank lines ignored)",
    )
    parser.add_argument(
        "--sample",
        choices=sorted(SAMPLE_WORD_LISTS),
        help="Use a built-in demo word list",
    )
    parser.add_argument(
        "--method",
        type=str,
        choices=[m.value for m in SearchMethod],
        default=SearchMethod.BACKTRACKING.value,
        help="Search engine",
    )
    parser.add_argument(
        "--min-crossings",
        type=int,
        default=None,
        help="Minimum number of crossing cells (default 0, or the sample's threshold)",
    )
    parser.add_argument(
        "--max-solutions", type=int, default=1, help="Stop after this many distinct layouts"
    )
    parser.add_argument("--max-iterations", type=int, default=None, help="Iteration budget")
    parser.add_argument(
        "--time-limit", type=float, default=None, help="Wall-clock budget in seconds"
    )
    parser.add_argument(
        "--normalize",
        action="store_true",
        help="Uppercase words, spell out umlauts and strip accents before searching",
    )
    parser.add_argument(
        "--progress-interval",
        type=int,
        default=100_000,
        help="Log progress every N iterations",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def collect_words(parser: argparse.ArgumentParser, args: argparse.Namespace) -> List[str]:
    words: List[str] = list(args.words)
    if args.words_file:
        try:
            words.extend(parse_words_file(args.words_file))
        except OSError as exc:
            parser.error(f"cannot read {args.words_file}: {exc.strerror or exc}")
    if args.sample:
        words.extend(SAMPLE_WORD_LISTS[args.sample])
    if not words:
        parser.error("provide WORDs, --words-file or --sample")
    return words


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(args.log_level)
    except ValueError as exc:
        parser.error(str(exc))

    words = collect_words(parser, args)
    min_crossings = args.min_crossings
    if min_crossings is None:
        min_crossings = SAMPLE_MIN_CROSSINGS.get(args.sample, 0) if args.sample else 0

    config = GeneratorConfig(
        words=words,
        method=SearchMethod(args.method),
        min_crossings=min_crossings,
        max_solutions=args.max_solutions,
        normalize_words=args.normalize,
        max_iterations=args.max_iterations,
        time_limit_seconds=args.time_limit,
        progress_interval=args.progress_interval,
    )
    try:
        generator = LayoutGenerator(config)
    except (WordListError, ValueError) as exc:
        parser.error(str(exc))
    result = generator.generate()

    if args.format == "json":
        payload: Dict[str, Any] = {
            "words": result.words,
            "method": result.method.value,
            "min_crossings": min_crossings,
            "iterations": result.iterations,
            "stop_reason": result.stop_reason.value,
            "elapsed_seconds": round(result.elapsed_seconds, 3),
            "solutions": [layout_to_jsonable(layout) for layout in result.solutions],
            "messages": result.messages,
        }
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print_generation_stats(result)

    return 0 if result.found else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
