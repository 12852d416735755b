"""
Ingest Module for the Cashback Reconciliation Engine.

Boundary between the external oracles and the engine:
- Oracle payload parsing (whole-payload accept or reject, field defaulting)
- Session snapshots of accumulated entries and bank configuration
"""

from .oracle_payload import (
    OraclePayloadError,
    SOURCE_DEFAULTS,
    coerce_raw_entries,
    parse_oracle_payload,
    raw_entry_to_dict,
)
from .session import CashbackSession

__all__ = [
    "OraclePayloadError",
    "SOURCE_DEFAULTS",
    "coerce_raw_entries",
    "parse_oracle_payload",
    "raw_entry_to_dict",
    "CashbackSession",
]
