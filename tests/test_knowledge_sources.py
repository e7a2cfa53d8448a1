from __future__ import annotations

import json
from pathlib import Path

import pytest

from adapters.json_knowledge_source import JsonKnowledgeSource, parse_slang_entry
from adapters.protocol_knowledge_source import ProtocolKnowledgeSource, extract_section
from adapters.static_knowledge_source import DEFAULT_SLANG, StaticKnowledgeSource
from core.config import ConfigurationError, KnowledgeConfig
from core.models import SlangRecord

PROTOCOL_DOC = """# Binary Protocol

### Timing Constraints & Cycle Operations
- **Critical Sorting Time**: 10:30 AM (FIXED REFERENCE POINT)

### Mumbai Slang & Local Terminology

#### Operational Terms
- **"Jhol in the route"** = Routing complication detected
  - *Meaning*: Unexpected delay or obstacle in delivery path
  - *Action*: Calculate alternative routing options
  - *Alternatives*: "Route mein problem", "Delivery stuck"

- **"Dadar handoff failed"** = Primary sorting hub transfer unsuccessful  

### Appendix
- **"Not slang"** = Should not be parsed
"""


def test_static_source_defaults_and_override() -> None:
    assert StaticKnowledgeSource().get_mumbai_slang() == DEFAULT_SLANG
    record = SlangRecord(slang="Dabba", meaning="Tiffin")
    assert StaticKnowledgeSource([record]).get_mumbai_slang() == (record,)
    assert StaticKnowledgeSource([]).get_mumbai_slang() == ()


def test_json_source_accepts_wrapped_object(tmp_path: Path) -> None:
    path = tmp_path / "slang.json"
    path.write_text(
        json.dumps(
            {
                "mumbai_slang": [
                    {"slang": "Packet chalega", "meaning": "Confirmed", "alternatives": ["Route ok"]},
                ]
            }
        ),
        encoding="utf-8",
    )
    records = JsonKnowledgeSource(str(path)).get_mumbai_slang()
    assert records == (
        SlangRecord(slang="Packet chalega", meaning="Confirmed", context="General usage", alternatives=("Route ok",)),
    )


def test_json_source_accepts_plain_list(tmp_path: Path) -> None:
    path = tmp_path / "slang.json"
    path.write_text(json.dumps([{"slang": "Local pakad", "meaning": "Train", "context": "Fast"}]), encoding="utf-8")
    (record,) = JsonKnowledgeSource(str(path)).get_mumbai_slang()
    assert record.context == "Fast"
    assert record.alternatives == ()


def test_json_source_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        JsonKnowledgeSource(str(tmp_path / "missing.json"))


def test_parse_slang_entry_validation() -> None:
    with pytest.raises(ConfigurationError):
        parse_slang_entry({"slang": "Jhol"})
    with pytest.raises(ConfigurationError):
        parse_slang_entry(["Jhol", "Delay"])
    assert parse_slang_entry({"slang": "Jhol", "meaning": "Delay", "alternatives": "Jhol hai"}).alternatives == (
        "Jhol hai",
    )


def test_protocol_section_stops_at_next_heading() -> None:
    section = extract_section(PROTOCOL_DOC)
    assert section is not None
    assert "Jhol in the route" in section
    assert "Not slang" not in section
    assert extract_section("# Nothing here") is None


def test_protocol_source_parses_entries(tmp_path: Path) -> None:
    path = tmp_path / "binary_protocol.md"
    path.write_text(PROTOCOL_DOC, encoding="utf-8")
    jhol, dadar = ProtocolKnowledgeSource(str(path)).get_mumbai_slang()

    assert jhol == SlangRecord(
        slang="Jhol in the route",
        meaning="Unexpected delay or obstacle in delivery path",
        context="Calculate alternative routing options",
        alternatives=("Route mein problem", "Delivery stuck"),
    )
    assert dadar.meaning == "Primary sorting hub transfer unsuccessful"
    assert dadar.context == "General usage"
    assert dadar.alternatives == ()


def test_protocol_source_without_section_is_empty(tmp_path: Path) -> None:
    path = tmp_path / "binary_protocol.md"
    path.write_text("# Binary Protocol\n\n## Station Key Mappings\n", encoding="utf-8")
    assert ProtocolKnowledgeSource(str(path)).get_mumbai_slang() == ()


def test_knowledge_config_validation() -> None:
    assert KnowledgeConfig(source="builtin").path is None
    with pytest.raises(ConfigurationError):
        KnowledgeConfig(source="json")
    with pytest.raises(ConfigurationError):
        KnowledgeConfig(source="redis", path="x")


def test_shipped_slang_file_loads() -> None:
    path = Path(__file__).resolve().parents[1] / "data" / "slang.json"
    records = JsonKnowledgeSource(str(path)).get_mumbai_slang()
    assert [record.slang for record in records] == [
        "Jhol in the route",
        "Dadar handoff failed",
        "Packet chalega",
        "Local pakad",
    ]
    assert records[2].alternatives == ("Route ok",)
