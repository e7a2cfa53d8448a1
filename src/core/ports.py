"""Ports (interfaces) used by the core processor.

The knowledge source is the only collaborator of the core, so alternative
vocabularies (static table, JSON file, protocol document) can be plugged in
without touching the matching logic.
"""

from __future__ import annotations

from typing import Protocol, Sequence

from core.models import SlangRecord


class KnowledgeSourcePort(Protocol):
    """Provider of the canonical slang vocabulary."""

    def get_mumbai_slang(self) -> Sequence[SlangRecord]:
        ...
