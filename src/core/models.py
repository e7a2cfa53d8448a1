"""Core domain models.

These dataclasses are shared across the core and adapters to avoid tight
coupling to any knowledge-source format.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import re
from types import MappingProxyType
from typing import Mapping, Tuple


@dataclass(frozen=True)
class SlangRecord:
    """A colloquial phrase, its canonical meaning and alternative phrasings."""

    slang: str
    meaning: str
    context: str = "General usage"
    alternatives: Tuple[str, ...] = ()


@dataclass(frozen=True)
class CachedTerm:
    """Slang cache entry: lowercase term, owning record and compiled pattern."""

    term: str
    record: SlangRecord
    pattern: re.Pattern


@dataclass(frozen=True)
class CachedAbbreviation:
    """Abbreviation cache entry with its compiled whole-word pattern."""

    abbreviation: str
    expansion: str
    pattern: re.Pattern


@dataclass(frozen=True)
class AbbreviationExpansion:
    """Result of the abbreviation pass."""

    original_text: str
    expanded_text: str
    expansions: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True)
class SlangRecognition:
    """Result of the slang pass."""

    detected: Tuple[SlangRecord, ...]
    processed_text: str
    expansions: Tuple[str, ...]


@dataclass(frozen=True)
class ProcessedInput:
    """Combined result of both passes with their provenance."""

    original_input: str
    processed_input: str
    slang_detected: Tuple[SlangRecord, ...]
    expansions: Tuple[str, ...]
    abbreviation_expansions: Mapping[str, str]
