from __future__ import annotations

import json
import logging
import sys
from argparse import ArgumentParser, Namespace
from dataclasses import fields

from data_designer_vibe_remover.analysis import AnalysisResult, advise, analyze_text, compare
from data_designer_vibe_remover.llm import LLMClient, VibeRemoverError, explain_remote, humanize_remote
from data_designer_vibe_remover.prompts import HumanizeRequest
from data_designer_vibe_remover.rewrite import RewriteOptions, rewrite_text

logger = logging.getLogger(__name__)

_METRIC_LABELS = (
    ("emoji_count", "Emojis"),
    ("em_dash_count", "Em dashes"),
    ("cliche_count", "Cliches"),
    ("buzzword_count", "Buzzwords"),
    ("avg_sentence_length", "Avg sent. len"),
    ("repetition_ratio", "Repetition"),
    ("score", "AI-sign score"),
)


def _add_input_args(parser: ArgumentParser) -> None:
    parser.add_argument("text", nargs="?", help="Text to process (reads from stdin if not provided)")
    parser.add_argument("-f", "--file", type=str, help="Path to input text file")


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="vibe-remover",
        description="Score text for AI-sounding signals and rewrite it to sound more human.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    analyze_parser = subparsers.add_parser("analyze", help="Score text for AI-sounding signals")
    _add_input_args(analyze_parser)
    analyze_parser.add_argument("--json", action="store_true", help="Print the analysis as JSON")

    rewrite_parser = subparsers.add_parser("rewrite", help="Apply the deterministic rewrite passes")
    _add_input_args(rewrite_parser)
    rewrite_parser.add_argument("-o", "--output", type=str, help="Output file path (writes to stdout if not provided)")
    preset = rewrite_parser.add_mutually_exclusive_group()
    preset.add_argument("--all", action="store_true", help="Enable every pass")
    preset.add_argument("--recommended", action="store_true", help="Enable every pass except syntax jitter")
    for f in fields(RewriteOptions):
        rewrite_parser.add_argument(f"--{f.name.replace('_', '-')}", dest=f.name, action="store_true")
    rewrite_parser.add_argument("--report", action="store_true", help="Print before/after scores to stderr")

    humanize_parser = subparsers.add_parser("humanize", help="Rewrite text with the remote model")
    _add_input_args(humanize_parser)
    humanize_parser.add_argument("--tone", default="neutral", help="Target tone (default: neutral)")
    humanize_parser.add_argument("--strength", choices=["light", "medium", "strong"], default="medium")
    humanize_parser.add_argument("--keep-emojis", action="store_true")
    humanize_parser.add_argument("--keep-em-dashes", action="store_true")
    humanize_parser.add_argument("--keep-buzzwords", action="store_true")
    humanize_parser.add_argument("--keep-rhythm", action="store_true")
    humanize_parser.add_argument("--keep-cliches", action="store_true")

    explain_parser = subparsers.add_parser("explain", help="Ask the remote model to assess the text")
    _add_input_args(explain_parser)

    return parser


def _read_input(args: Namespace) -> str:
    if args.file:
        with open(args.file, encoding="utf-8") as fh:
            return fh.read()
    if args.text is not None:
        return args.text
    return sys.stdin.read()


def _format_metric(name: str, value: object) -> str:
    if name == "repetition_ratio":
        return f"{round(float(value) * 100)}%"
    return str(value)


def _print_analysis(result: AnalysisResult) -> None:
    for name, label in _METRIC_LABELS:
        print(f"{label:<14} {_format_metric(name, getattr(result, name))}")
    for line in advise(result):
        print(f"- {line}")


def _rewrite_options(args: Namespace) -> RewriteOptions:
    if args.all:
        return RewriteOptions.all_enabled()
    if args.recommended:
        return RewriteOptions.recommended()
    return RewriteOptions(**{f.name: getattr(args, f.name) for f in fields(RewriteOptions)})


def handle_analyze(args: Namespace) -> None:
    result = analyze_text(_read_input(args))
    if args.json:
        print(json.dumps(result.to_payload(), indent=2))
    else:
        _print_analysis(result)


def handle_rewrite(args: Namespace) -> None:
    text = _read_input(args)
    rewritten = rewrite_text(text, _rewrite_options(args))
    if args.output:
        with open(args.output, "w", encoding="utf-8") as fh:
            fh.write(rewritten + "\n")
    else:
        print(rewritten)
    if args.report:
        before, after = analyze_text(text), analyze_text(rewritten)
        deltas = compare(before, after)
        print(f"score: {before.score} -> {after.score} ({deltas['score']:+d})", file=sys.stderr)


def handle_humanize(args: Namespace) -> None:
    request = HumanizeRequest(
        target_tone=args.tone,
        remove_emojis=not args.keep_emojis,
        limit_em_dashes=not args.keep_em_dashes,
        reduce_buzzwords=not args.keep_buzzwords,
        vary_sentence_length=not args.keep_rhythm,
        simplify_cliches=not args.keep_cliches,
        strength=args.strength,
    )
    print(humanize_remote(LLMClient(), _read_input(args), request))


def handle_explain(args: Namespace) -> None:
    print(explain_remote(LLMClient(), _read_input(args)))


_HANDLERS = {
    "analyze": handle_analyze,
    "rewrite": handle_rewrite,
    "humanize": handle_humanize,
    "explain": handle_explain,
}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 0

    try:
        _HANDLERS[args.command](args)
    except (VibeRemoverError, ValueError) as exc:
        logger.debug("command failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
