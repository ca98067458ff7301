import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from bloomcheck import (
    CONFIG,
    WORD_READER,
    BloomFilter,
    BloomFilterError,
    FalsePositiveBenchmark,
    InteractiveSession,
    SpellChecker,
)

console = Console()


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=debug)],
        force=True,
    )


def _wordlists(args: argparse.Namespace) -> List[str]:
    return args.wordlist or [CONFIG.wordlist_path]


def _error_rate(args: argparse.Namespace) -> float:
    return CONFIG.error_rate if args.error_rate is None else args.error_rate


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def run_check(args: argparse.Namespace) -> int:
    checker = SpellChecker.from_word_list(
        _wordlists(args),
        use_bloom_filter=not args.exact,
        error_rate=_error_rate(args),
    )
    session = InteractiveSession(checker, console)
    if not args.words:
        session.run()
        return 0
    all_valid = True
    for word in args.words:
        valid = checker.is_word_valid(word)
        all_valid = all_valid and valid
        style = "green" if valid else "red"
        console.print(f"[{style}]{escape(session.verdict(word))}[/{style}]")
    return 0 if all_valid else 1


def run_bench(args: argparse.Namespace) -> int:
    words = WORD_READER.read_many(_wordlists(args))
    error_rate = _error_rate(args)
    bloom_checker = SpellChecker(words, use_bloom_filter=True, error_rate=error_rate)
    exact_checker = SpellChecker(words, use_bloom_filter=False)
    benchmark = FalsePositiveBenchmark(bloom_checker, exact_checker)
    result = benchmark.run(
        iterations=args.iterations,
        word_length=args.length,
        seed=args.seed,
        console=console,
    )
    table = Table(title="bloomcheck - False Positive Benchmark")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Dictionary words", str(len(words)))
    table.add_row("Target error rate", f"{error_rate:g}")
    table.add_row("Number of iterations", str(result.iterations))
    table.add_row("Number of false positives", str(result.false_positives))
    table.add_row("False positive rate", f"{result.false_positive_rate:.4f}")
    console.print(table)
    return 0


def run_info(args: argparse.Namespace) -> int:
    if args.capacity is not None:
        capacity = args.capacity
        source = "--capacity"
    else:
        paths = _wordlists(args)
        capacity = len(WORD_READER.read_many(paths))
        source = ", ".join(str(p) for p in paths)
    bloom = BloomFilter.with_error_rate(capacity, None, _error_rate(args))
    table = Table(title="bloomcheck - Filter Parameters")
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Source", escape(source))
    table.add_row("Capacity", str(bloom.capacity))
    table.add_row("Target error rate", f"{bloom.error_rate:g}")
    table.add_row("Bit array size", str(bloom.bit_count))
    table.add_row("Hash functions", str(bloom.hash_function_count))
    table.add_row("Memory", f"{(bloom.bit_count + 7) // 8 / 1024:.1f} KiB")
    console.print(table)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bloomcheck",
        description="bloomcheck - Bloom filter spell checker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="\nExamples:\n  bloomcheck check                     Interactive spell check\n  bloomcheck check colour color        Check the given words\n  bloomcheck bench --iterations 50000  Measure the false positive rate\n  bloomcheck info --capacity 1000000   Show filter sizing\n        ",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging"
    )
    wordlist = argparse.ArgumentParser(add_help=False)
    wordlist.add_argument(
        "--wordlist",
        action="append",
        metavar="PATH",
        help=f"Word list, one word per line (repeatable, default: {CONFIG.wordlist_path})",
    )
    wordlist.add_argument(
        "--error-rate",
        type=float,
        default=None,
        help=f"Target false positive rate (default: {CONFIG.error_rate})",
    )
    subparsers = parser.add_subparsers(dest="command")
    check_parser = subparsers.add_parser(
        "check", parents=[wordlist], help="Check the spelling of words"
    )
    check_parser.add_argument(
        "words", nargs="*", help="Words to check; interactive when omitted"
    )
    check_parser.add_argument(
        "--exact", action="store_true", help="Use an exact set instead of a Bloom filter"
    )
    bench_parser = subparsers.add_parser(
        "bench", parents=[wordlist], help="Compare the Bloom filter to an exact set"
    )
    bench_parser.add_argument(
        "--iterations", type=_non_negative_int, default=CONFIG.iterations, help="Random words to query"
    )
    bench_parser.add_argument(
        "--length", type=_non_negative_int, default=CONFIG.word_length, help="Random word length"
    )
    bench_parser.add_argument(
        "--seed", type=int, default=CONFIG.seed, help="Random seed"
    )
    info_parser = subparsers.add_parser(
        "info", parents=[wordlist], help="Show derived filter parameters"
    )
    info_parser.add_argument(
        "--capacity", type=int, default=None, help="Size for this many items instead of a word list"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.debug)
    if args.command is None:
        args = parser.parse_args(
            [*(argv if argv is not None else sys.argv[1:]), "info"]
        )
    commands = {"check": run_check, "bench": run_bench, "info": run_info}
    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return
    try:
        code = handler(args)
    except (OSError, BloomFilterError) as e:
        console.print(f"[bold red]error:[/bold red] {escape(str(e))}")
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    main()
