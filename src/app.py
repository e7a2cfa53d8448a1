"""Application entry point for the bambaiyya normalizer."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Iterable, Optional

from art import tprint
from rich.console import Console
from rich.table import Table
from rich.text import Text

import settings
from adapters.json_knowledge_source import JsonKnowledgeSource
from adapters.protocol_knowledge_source import ProtocolKnowledgeSource
from adapters.report_formatting import format_classification, format_report
from adapters.static_knowledge_source import StaticKnowledgeSource
from core.classifiers import classify
from core.config import KnowledgeConfig
from core.ports import KnowledgeSourcePort
from core.processor import SlangProcessor

NAME = "BAMBAIYYA"
FONT = "tarty-1"


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


def _configure_logging() -> None:
    config = settings.LOGGING or {}
    if not config.get("enabled", False):
        return

    level_name = str(config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    handlers: list[logging.Handler] = []

    if config.get("console", True):
        # Reports go to stdout, so log lines stay on stderr.
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        path = settings.resolve_path(file_cfg.get("path", "logs/bambaiyya.log"))
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        max_bytes = int(file_cfg.get("max_bytes", 5 * 1024 * 1024))
        backup_count = int(file_cfg.get("backup_count", 5))
        file_handler = RotatingFileHandler(
            path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        return

    logging.basicConfig(level=level, handlers=handlers)


def build_knowledge_source(config: KnowledgeConfig) -> KnowledgeSourcePort:
    """Select the knowledge adapter named in the configuration."""

    if config.source == "builtin":
        return StaticKnowledgeSource()
    if config.source == "json":
        return JsonKnowledgeSource(config.path)
    # KnowledgeConfig only admits known sources, so "protocol" is what remains.
    return ProtocolKnowledgeSource(config.path)


def _title_text(title: str) -> Text:
    return Text.assemble((NAME, "bold magenta"), " / ", (title, "bold"))


def _read_lines(texts: Iterable[str]) -> list[str]:
    lines = [text for text in texts if text]
    if lines:
        return [" ".join(lines)]
    return [line.rstrip("\n") for line in sys.stdin if line.strip()]


def _process(console: Console, processor: SlangProcessor, texts: list[str], mode: str) -> None:
    console.print(_title_text("process"))
    for line in _read_lines(texts):
        result = processor.process_input(line)
        console.print(Text(format_report(result, mode)))


def _classify(console: Console, texts: list[str]) -> None:
    console.print(_title_text("classify"))
    for line in _read_lines(texts):
        console.print(Text(format_classification(line, classify(line))))


def _list_terms(console: Console, processor: SlangProcessor) -> None:
    table = Table(title="Slang terms")
    table.add_column("Term")
    table.add_column("Primary phrase")
    table.add_column("Meaning")
    for term, entry in processor.slang_cache.items():
        table.add_row(term, entry.record.slang, entry.record.meaning)
    console.print(table)


def _list_abbreviations(console: Console, processor: SlangProcessor) -> None:
    table = Table(title="Abbreviations")
    table.add_column("Abbreviation")
    table.add_column("Expansion")
    for abbreviation, entry in processor.abbreviation_cache.items():
        table.add_row(abbreviation, entry.expansion)
    console.print(table)


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="bambaiyya")
    parser.add_argument("--no-banner", action="store_true", help="Skip the startup banner")
    parser.add_argument(
        "--format",
        choices=["plain", "markdown"],
        default=None,
        help="Report format (defaults to report.format in config.json)",
    )
    subparsers = parser.add_subparsers(dest="command")

    process_parser = subparsers.add_parser("process", help="Normalize text (reads stdin when no text is given)")
    process_parser.add_argument("text", nargs="*")
    classify_parser = subparsers.add_parser("classify", help="Show heuristic signals for text")
    classify_parser.add_argument("text", nargs="*")
    subparsers.add_parser("terms", help="List supported slang terms")
    subparsers.add_parser("abbreviations", help="List supported abbreviations")

    args = parser.parse_args(argv)
    if not args.no_banner:
        _print_banner()
    _configure_logging()
    logger = logging.getLogger(__name__)

    # Reports are meant to be piped, so rich must not insert line breaks.
    console = Console(soft_wrap=True)
    if args.command == "classify":
        _classify(console, args.text)
        return

    processor = SlangProcessor(build_knowledge_source(settings.KNOWLEDGE))
    logger.info("Knowledge source selected - %s", settings.KNOWLEDGE.source)

    if args.command == "terms":
        _list_terms(console, processor)
        return
    if args.command == "abbreviations":
        _list_abbreviations(console, processor)
        return
    texts = getattr(args, "text", [])
    _process(console, processor, texts, args.format or settings.REPORT_FORMAT)


if __name__ == "__main__":
    main()
