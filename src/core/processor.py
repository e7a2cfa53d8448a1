"""Core slang normalization pipeline.

This module is source-agnostic. It only relies on the knowledge source port,
so vocabularies from files, embedded tables or remote config plug in without
changes here.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from core import classifiers
from core.config import ConfigurationError
from core.models import (
    AbbreviationExpansion,
    CachedAbbreviation,
    CachedTerm,
    ProcessedInput,
    SlangRecognition,
    SlangRecord,
)
from core.ports import KnowledgeSourcePort
from core.vocabulary import (
    build_abbreviation_cache,
    build_slang_cache,
    compile_whole_word,
    contextual_message,
)

LOGGER = logging.getLogger(__name__)


class SlangProcessor:
    """Expands abbreviations, then rewrites slang into canonical terminology.

    Both caches are built once here and never change afterwards, so a single
    instance can serve concurrent callers without locking.
    """

    def __init__(self, knowledge_source: Optional[KnowledgeSourcePort]) -> None:
        if knowledge_source is None:
            raise ConfigurationError("SlangProcessor requires a knowledge source")

        self._slang_cache = build_slang_cache(knowledge_source.get_mumbai_slang() or ())
        self._abbreviation_cache = build_abbreviation_cache()
        LOGGER.info(
            "Vocabulary cached: %s slang terms, %s abbreviations",
            len(self._slang_cache),
            len(self._abbreviation_cache),
        )

    @property
    def slang_cache(self) -> Mapping[str, CachedTerm]:
        return self._slang_cache

    @property
    def abbreviation_cache(self) -> Mapping[str, CachedAbbreviation]:
        return self._abbreviation_cache

    def expand_abbreviations(self, text: str) -> AbbreviationExpansion:
        """Replace known area abbreviations with their canonical codes.

        Detection always reads the original text while replacements accumulate
        in ``expanded_text``, so an earlier expansion is only rewritten again if
        it is itself a later trigger phrase.
        """

        expanded_text = text
        expansions: dict[str, str] = {}

        for entry in self._abbreviation_cache.values():
            for match in entry.pattern.finditer(text):
                literal = match.group(0)
                expansions[literal] = entry.expansion
                expanded_text = compile_whole_word(literal).sub(
                    lambda _m, value=entry.expansion: value, expanded_text
                )

        return AbbreviationExpansion(
            original_text=text,
            expanded_text=expanded_text,
            expansions=MappingProxyType(expansions),
        )

    def recognize_slang(self, text: str) -> SlangRecognition:
        """Detect cached slang phrases and rewrite them to their meaning."""

        processed_text = text
        detected: list[SlangRecord] = []
        expansions: list[str] = []

        for entry in self._slang_cache.values():
            if not entry.pattern.search(text):
                continue
            record = entry.record
            LOGGER.debug("Slang detected: %r (record %r)", entry.term, record.slang)
            detected.append(record)
            expansions.append(contextual_message(record))
            processed_text = entry.pattern.sub(lambda _m, value=record.meaning: value, processed_text)

        return SlangRecognition(
            detected=tuple(detected),
            processed_text=processed_text,
            expansions=tuple(expansions),
        )

    def process_input(self, text: str) -> ProcessedInput:
        """Run abbreviation expansion, then slang recognition on its output."""

        abbreviation_result = self.expand_abbreviations(text)
        slang_result = self.recognize_slang(abbreviation_result.expanded_text)
        return ProcessedInput(
            original_input=text,
            processed_input=slang_result.processed_text,
            slang_detected=slang_result.detected,
            expansions=slang_result.expansions,
            abbreviation_expansions=abbreviation_result.expansions,
        )

    def is_route_complication(self, text: str) -> bool:
        return classifiers.is_route_complication(text)

    def is_dadar_handoff_failed(self, text: str) -> bool:
        return classifiers.is_dadar_handoff_failed(text)

    def is_delivery_confirmed(self, text: str) -> bool:
        return classifiers.is_delivery_confirmed(text)

    def supported_slang_terms(self) -> Tuple[str, ...]:
        return tuple(self._slang_cache)

    def supported_abbreviations(self) -> Tuple[str, ...]:
        return tuple(self._abbreviation_cache)
