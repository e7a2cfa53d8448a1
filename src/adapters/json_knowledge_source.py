"""JSON file knowledge source.

The file holds either a list of slang objects or an object with a
``mumbai_slang`` list, so the vocabulary can live next to other settings.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Sequence, Tuple

from core.config import ConfigurationError
from core.models import SlangRecord

LOGGER = logging.getLogger(__name__)

DEFAULT_CONTEXT = "General usage"


def parse_slang_entry(entry: Any) -> SlangRecord:
    """Convert one JSON object into a record, validating required fields."""

    if not isinstance(entry, dict):
        raise ConfigurationError(f"Slang entry must be an object, got {type(entry).__name__}")
    slang = entry.get("slang")
    meaning = entry.get("meaning")
    if not slang or not meaning:
        raise ConfigurationError(f"Slang entry requires 'slang' and 'meaning': {entry!r}")

    alternatives = entry.get("alternatives") or []
    if isinstance(alternatives, str):
        alternatives = [alternatives]
    return SlangRecord(
        slang=str(slang),
        meaning=str(meaning),
        context=str(entry.get("context") or DEFAULT_CONTEXT),
        alternatives=tuple(str(alt) for alt in alternatives),
    )


class JsonKnowledgeSource:
    """Knowledge source loaded once from a JSON file."""

    def __init__(self, path: str) -> None:
        if not os.path.exists(path):
            raise FileNotFoundError(f"Slang file not found: {path}")

        with open(path, "r", encoding="utf-8") as handle:
            payload = json.load(handle)

        if isinstance(payload, dict):
            payload = payload.get("mumbai_slang", [])
        if not isinstance(payload, list):
            raise ConfigurationError(f"Slang file must contain a list of entries: {path}")

        self._records: Tuple[SlangRecord, ...] = tuple(parse_slang_entry(entry) for entry in payload)
        LOGGER.info("Loaded %s slang records from %s", len(self._records), path)

    def get_mumbai_slang(self) -> Sequence[SlangRecord]:
        return self._records
