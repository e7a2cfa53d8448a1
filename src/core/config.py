"""Core configuration dataclasses.

We keep config parsing outside the core, but these dataclasses define the
shape the core expects so adapters and app layers can build safely.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

KNOWLEDGE_SOURCES = ("builtin", "json", "protocol")


class ConfigurationError(RuntimeError):
    """Raised when the processor or its knowledge source is misconfigured."""


@dataclass(frozen=True)
class KnowledgeConfig:
    """Which knowledge source feeds the slang vocabulary."""

    source: str
    path: Optional[str] = None

    def __post_init__(self) -> None:
        if self.source not in KNOWLEDGE_SOURCES:
            raise ConfigurationError(f"Unsupported knowledge source: {self.source}")
        if self.source != "builtin" and not self.path:
            raise ConfigurationError(f"knowledge.path is required for source={self.source}")
