"""CLI entrypoint for heblemma."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from heblemma.config import AppConfig, load_config
from heblemma.errors import DictionaryLoadError
from heblemma.io import to_json, write_json
from heblemma.lemmatize import canonicalize_all, list_candidates
from heblemma.logconfig import setup_logging
from heblemma.models import LemmatizeRawResponse, LemmatizeResponse
from heblemma.morphology import Analyzer, load_analyzer
from heblemma.morphology.dictionary import download_dictionary


def build_parser() -> argparse.ArgumentParser:
    """Create the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="heblemma",
        description="Hebrew lemmatization service.",
    )
    subparsers = parser.add_subparsers(dest="command")

    lemmatize = subparsers.add_parser("lemmatize", help="Lemmatize one or more sentences")
    lemmatize.add_argument("sentences", nargs="+", help="Sentences to lemmatize")
    lemmatize.add_argument(
        "--strategy",
        choices=["canonical", "first"],
        default="canonical",
        help="Lemma selection strategy (default: canonical)",
    )
    _add_dictionary_argument(lemmatize)
    _add_output_argument(lemmatize)

    raw = subparsers.add_parser("raw", help="Show unfiltered analyzer candidates per token")
    raw.add_argument("sentence", help="Sentence to analyze")
    _add_dictionary_argument(raw)
    _add_output_argument(raw)

    download = subparsers.add_parser("download", help="Download the Hebrew dictionary models")
    download.add_argument("--dir", default=None, help="Target dictionary directory")

    serve = subparsers.add_parser("serve", help="Run the heblemma HTTP API")
    serve.add_argument("--host", default=None, help="Override API host")
    serve.add_argument("--port", type=int, default=None, help="Override API port")
    _add_dictionary_argument(serve)

    return parser


def _add_dictionary_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--dictionary",
        default=None,
        help="Dictionary directory (default: configured or standard location)",
    )


def _add_output_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output JSON path. If omitted, prints to stdout.",
    )


def main(argv: Sequence[str] | None = None, *, analyzer: Analyzer | None = None) -> int:
    """Run the CLI command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    config = load_config()
    setup_logging(config.log_level)

    try:
        if args.command == "download":
            directory = download_dictionary(args.dir or config.dictionary_path)
            print(f"Downloaded dictionary to {directory}")
            return 0

        if analyzer is None:
            analyzer = _load(config, args.dictionary)

        if args.command == "lemmatize":
            response = LemmatizeResponse(
                results=canonicalize_all(args.sentences, analyzer, args.strategy)
            )
            return _emit(response, args.output)

        if args.command == "raw":
            raw_response = LemmatizeRawResponse(results=list_candidates(args.sentence, analyzer))
            return _emit(raw_response, args.output)
    except DictionaryLoadError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.command == "serve":
        return _serve(args, config, analyzer)

    parser.error(f"Unknown command: {args.command}")
    return 2


def _load(config: AppConfig, dictionary: str | None) -> Analyzer:
    return load_analyzer(dictionary or config.dictionary_path, use_gpu=config.use_gpu)


def _emit(response: LemmatizeResponse | LemmatizeRawResponse, output: str | None) -> int:
    if output:
        write_json(response, output)
        print(f"Wrote lemmatization JSON to {output}")
        return 0
    print(to_json(response))
    return 0


def _serve(args: argparse.Namespace, config: AppConfig, analyzer: Analyzer) -> int:
    try:
        import uvicorn
    except ModuleNotFoundError:
        print(
            "`heblemma serve` requires uvicorn. Install project dependencies first.",
            file=sys.stderr,
        )
        return 1

    from heblemma.api import create_app

    app = create_app(analyzer=analyzer)
    uvicorn.run(
        app,
        host=args.host or config.api_host,
        port=args.port or config.api_port,
        log_level=config.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
