"""Shared report formatting helpers.

Keeping formatting here prevents drift between the CLI and any other caller
that wants to show what the normalizer rewrote and why.
"""

from __future__ import annotations

from core.classifiers import Classification
from core.models import ProcessedInput

DIVIDER = "──────────────"


def _describe_slang(result: ProcessedInput) -> list[str]:
    return [f"{record.slang} -> {record.meaning}" for record in result.slang_detected]


def _describe_abbreviations(result: ProcessedInput) -> list[str]:
    return [f"{literal} -> {expansion}" for literal, expansion in result.abbreviation_expansions.items()]


def _format_plain(result: ProcessedInput) -> str:
    lines = [
        f"Input:     {result.original_input}",
        f"Processed: {result.processed_input}",
        DIVIDER,
    ]
    abbreviations = _describe_abbreviations(result)
    if abbreviations:
        lines.append("Abbreviations:")
        lines.extend(f"  {item}" for item in abbreviations)
    slang = _describe_slang(result)
    if slang:
        lines.append("Slang:")
        lines.extend(f"  {item}" for item in slang)
    if result.expansions:
        lines.append("Notes:")
        lines.extend(f"  {message}" for message in result.expansions)
    if not abbreviations and not slang:
        lines.append("No local terminology detected.")
    lines.append(DIVIDER)
    return "\n".join(lines)


def _format_markdown(result: ProcessedInput) -> str:
    # Backticks and asterisks in user text would otherwise break the layout.
    def escape_md(value: str) -> str:
        for ch in r"*[`_":
            value = value.replace(ch, f"\\{ch}")
        return value

    lines = [
        f"**Input:** {escape_md(result.original_input)}",
        f"**Processed:** {escape_md(result.processed_input)}",
    ]
    abbreviations = _describe_abbreviations(result)
    if abbreviations:
        lines.extend(["", "**Abbreviations:**"])
        lines.extend(f"- {escape_md(item)}" for item in abbreviations)
    slang = _describe_slang(result)
    if slang:
        lines.extend(["", "**Slang:**"])
        lines.extend(f"- {escape_md(item)}" for item in slang)
    if result.expansions:
        lines.extend(["", "**Notes:**"])
        lines.extend(f"- {escape_md(message)}" for message in result.expansions)
    return "\n".join(lines)


def format_report(result: ProcessedInput, mode: str = "plain") -> str:
    """Return the processing report formatted for the requested mode."""

    if mode == "plain":
        return _format_plain(result)
    if mode == "markdown":
        return _format_markdown(result)
    raise ValueError(f"Unsupported report format: {mode}")


def format_classification(text: str, classification: Classification) -> str:
    """Return a one-signal-per-line summary of the heuristic classifiers."""

    def flag(value: bool) -> str:
        return "yes" if value else "no"

    return "\n".join(
        [
            f"Input:                {text}",
            f"Route complication:   {flag(classification.route_complication)}",
            f"Dadar handoff failed: {flag(classification.dadar_handoff_failed)}",
            f"Delivery confirmed:   {flag(classification.delivery_confirmed)}",
            f"Severity:             {classification.severity}",
        ]
    )
