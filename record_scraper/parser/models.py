from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple

# Field identifiers used as header-mapping keys, CSV columns and JSON keys.
FIELD_VALUE = "observed_value"
FIELD_ACTOR = "actor"
FIELD_DATE = "observed_at"
FIELD_LOCATION = "location"

RECORD_FIELDS: Tuple[str, ...] = (FIELD_VALUE, FIELD_ACTOR, FIELD_DATE, FIELD_LOCATION)
TEXT_FIELDS: Tuple[str, ...] = (FIELD_ACTOR, FIELD_DATE, FIELD_LOCATION)

HeaderMapping = Dict[str, int]


@dataclass(frozen=True)
class Record:
    """One validated observation from a record-progression table row.

    ``observed_at`` is kept as the raw cell text; source pages mix date
    formats too freely to parse reliably.
    """
    observed_value: float
    actor: str
    observed_at: str
    location: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
