"""Vocabulary tables and cache compilation (core domain)."""

from __future__ import annotations

import logging
import re
from types import MappingProxyType
from typing import Iterable, Mapping

from core.models import CachedAbbreviation, CachedTerm, SlangRecord

LOGGER = logging.getLogger(__name__)

# Common Mumbai area abbreviations. Replacement passes run in this order.
ABBREVIATIONS: Mapping[str, str] = MappingProxyType(
    {
        "bombie": "Mumbai local",
        "bombay": "Mumbai",
        "vt": "CST",
        "victoria terminus": "CST",
        "churchgate": "CHU",
        "bandra": "BAN",
        "andheri": "AND",
        "dadar tt": "DDR",
        "central hub": "DDR",
        "main junction": "DDR",
        "bk complex": "BKC",
        "bandra complex": "BKC",
        "nariman": "NAR",
        "vile parle": "VLP",
        "ville": "VLP",
        "vp": "VLP",
        "goregaon": "GOR",
        "malad": "MAL",
        "borivali": "BOR",
        "kurla": "KUR",
        "ghatkopar": "GHA",
        "vikhroli": "VIK",
        "bhandup": "BHA",
        "powai": "POW",
    }
)

# Hand-authored explanations, keyed by the lowercased primary slang phrase.
CONTEXTUAL_MESSAGES: Mapping[str, str] = MappingProxyType(
    {
        "jhol in the route": "Route complication detected - alternative paths will be calculated",
        "dadar handoff failed": "Primary sorting missed - routing to secondary sort at 1:00 PM",
        "packet chalega": "Delivery confirmed - route proceeding as planned",
        "local pakad": "Use suburban railway for fastest routing",
    }
)

GENERIC_MESSAGE_PREFIX = "Mumbai terminology: "


def compile_whole_word(phrase: str) -> re.Pattern:
    """Compile a case-insensitive pattern matching ``phrase`` as a whole word.

    The phrase is escaped, so punctuation inside it is matched literally. The
    lookarounds require a non-word character (or the text edge) on both sides.
    """

    return re.compile(rf"(?<!\w){re.escape(phrase)}(?!\w)", re.IGNORECASE)


def contextual_message(record: SlangRecord) -> str:
    """Return the explanation for a detected record.

    Dispatch uses the primary phrase only, even when an alternative matched.
    """

    message = CONTEXTUAL_MESSAGES.get(record.slang.lower())
    if message is not None:
        return message
    return f"{GENERIC_MESSAGE_PREFIX}{record.meaning}"


def build_slang_cache(records: Iterable[SlangRecord]) -> Mapping[str, CachedTerm]:
    """Index every primary phrase and alternative by its lowercase form.

    A later phrase that lowercases to an existing key replaces that entry.
    """

    cache: dict[str, CachedTerm] = {}
    for record in records:
        for phrase in (record.slang, *record.alternatives):
            term = phrase.lower()
            if not term.strip():
                LOGGER.warning("Skipping empty phrase for slang %r", record.slang)
                continue
            cache[term] = CachedTerm(term=term, record=record, pattern=compile_whole_word(term))
    return MappingProxyType(cache)


def build_abbreviation_cache(
    table: Mapping[str, str] = ABBREVIATIONS,
) -> Mapping[str, CachedAbbreviation]:
    """Compile the abbreviation table, preserving its order."""

    cache: dict[str, CachedAbbreviation] = {}
    for abbreviation, expansion in table.items():
        key = abbreviation.lower()
        cache[key] = CachedAbbreviation(
            abbreviation=key,
            expansion=expansion,
            pattern=compile_whole_word(key),
        )
    return MappingProxyType(cache)
