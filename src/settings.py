"""Static configuration for bambaiyya.

All user-editable settings (knowledge source, report format, logging) live in
a single JSON file for quick edits without touching Python.
"""

import json
import os

from dotenv import load_dotenv

from core.config import KnowledgeConfig

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# BAMBAIYYA_CONFIG may come from a .env file to point at another config.json.
load_dotenv()
CONFIG_PATH = os.getenv("BAMBAIYYA_CONFIG", os.path.join(PROJECT_ROOT, "config.json"))


def _load_json_config() -> dict:
    """Load config.json with a flat, user-friendly schema."""

    if not os.path.exists(CONFIG_PATH):
        raise FileNotFoundError(f"Config file not found: {CONFIG_PATH}")

    with open(CONFIG_PATH, "r", encoding="utf-8") as handle:
        return json.load(handle)


def resolve_path(path: str) -> str:
    """Resolve config-relative paths against the project root."""

    if os.path.isabs(path):
        return path
    return os.path.join(PROJECT_ROOT, path)


_CONFIG = _load_json_config()

# Knowledge source selection: "builtin", "json" or "protocol".
_knowledge = _CONFIG.get("knowledge", {})
_knowledge_path = _knowledge.get("path")
KNOWLEDGE = KnowledgeConfig(
    source=_knowledge.get("source", "builtin"),
    path=resolve_path(_knowledge_path) if _knowledge_path else None,
)

# Report format used by the CLI: "plain" or "markdown".
REPORT_FORMAT = _CONFIG.get("report", {}).get("format", "plain")

# Logging configuration (optional).
LOGGING = _CONFIG.get("logging", {})
