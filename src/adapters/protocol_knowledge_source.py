"""Protocol document knowledge source.

Reads slang entries from the markdown protocol document shared with the
routing team. Entries look like::

    - **"Jhol in the route"** = Routing complication detected
      - *Meaning*: Unexpected delay or obstacle in delivery path
      - *Action*: Calculate alternative routing options
      - *Alternatives*: "Route mein problem", "Delivery stuck"
"""

from __future__ import annotations

import logging
import os
import re
from typing import List, Optional, Sequence, Tuple

from core.models import SlangRecord

LOGGER = logging.getLogger(__name__)

SECTION_TITLE = "Mumbai Slang & Local Terminology"
DEFAULT_CONTEXT = "General usage"

_SECTION_RE = re.compile(rf"^#{{2,3}} {re.escape(SECTION_TITLE)}[ \t]*$", re.MULTILINE)
_NEXT_SECTION_RE = re.compile(r"^#{1,3} ", re.MULTILINE)
_ENTRY_RE = re.compile(r'- \*\*"([^"]+)"\*\* = ([^\n]+)')
_MEANING_RE = re.compile(r"\*Meaning\*:\s*([^\n]+)")
_ACTION_RE = re.compile(r"\*Action\*:\s*([^\n]+)")
_ALTERNATIVES_RE = re.compile(r"\*Alternatives\*:\s*([^\n]+)")


def extract_section(content: str) -> Optional[str]:
    """Return the slang section body, stopping at the next section heading."""

    start = _SECTION_RE.search(content)
    if start is None:
        return None
    end = _NEXT_SECTION_RE.search(content, start.end())
    return content[start.end() : end.start() if end else len(content)]


def _split_alternatives(raw: str) -> Tuple[str, ...]:
    parts = (part.strip().replace('"', "") for part in raw.split(","))
    return tuple(part for part in parts if part)


def parse_slang_section(section: str) -> List[SlangRecord]:
    """Parse every slang entry in a section body."""

    entries = list(_ENTRY_RE.finditer(section))
    records: List[SlangRecord] = []
    for index, entry in enumerate(entries):
        block_end = entries[index + 1].start() if index + 1 < len(entries) else len(section)
        block = section[entry.start() : block_end]

        meaning = _MEANING_RE.search(block)
        action = _ACTION_RE.search(block)
        alternatives = _ALTERNATIVES_RE.search(block)
        records.append(
            SlangRecord(
                slang=entry.group(1),
                meaning=(meaning.group(1) if meaning else entry.group(2)).strip(),
                context=action.group(1).strip() if action else DEFAULT_CONTEXT,
                alternatives=_split_alternatives(alternatives.group(1)) if alternatives else (),
            )
        )
    return records


class ProtocolKnowledgeSource:
    """Knowledge source parsed once from the protocol markdown document."""

    def __init__(self, path: str) -> None:
        if not os.path.exists(path):
            raise FileNotFoundError(f"Protocol file not found: {path}")

        with open(path, "r", encoding="utf-8") as handle:
            content = handle.read()

        section = extract_section(content)
        if section is None:
            LOGGER.warning("No '%s' section in %s", SECTION_TITLE, path)
            self._records: Tuple[SlangRecord, ...] = ()
        else:
            self._records = tuple(parse_slang_section(section))
        LOGGER.info("Loaded %s slang records from %s", len(self._records), path)

    def get_mumbai_slang(self) -> Sequence[SlangRecord]:
        return self._records
