"""Built-in knowledge source with the operational dabbawala vocabulary."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple

from core.models import SlangRecord

DEFAULT_SLANG: Tuple[SlangRecord, ...] = (
    SlangRecord(
        slang="Jhol in the route",
        meaning="Unexpected delay or obstacle in delivery path",
        context="Calculate alternative routing options",
        alternatives=("Route mein problem", "Delivery stuck"),
    ),
    SlangRecord(
        slang="Dadar handoff failed",
        meaning="Packet missed the 10:30 AM sorting window",
        context="Route to 1:00 PM secondary sort or direct delivery",
        alternatives=("Dadar miss ho gaya", "Sorting time nikla"),
    ),
    SlangRecord(
        slang="Packet chalega",
        meaning="Route confirmed, no complications",
        context="Positive routing confirmation",
    ),
    SlangRecord(
        slang="Local pakad",
        meaning="Use suburban railway for fastest routing",
        context="Time-critical delivery instructions",
    ),
)


class StaticKnowledgeSource:
    """Knowledge source backed by an in-memory sequence of records."""

    def __init__(self, records: Optional[Iterable[SlangRecord]] = None) -> None:
        self._records = DEFAULT_SLANG if records is None else tuple(records)

    def get_mumbai_slang(self) -> Sequence[SlangRecord]:
        return self._records
