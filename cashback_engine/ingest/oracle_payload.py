"""
Oracle payload parsing.

The extraction and rewrite oracles return JSON arrays of
{"bankName", "category", "percentage"} records. They are untrusted: a payload
is either accepted whole or rejected whole, and field-level problems are
defaulted rather than rejected.
"""

import json
import logging
import uuid
from typing import Any, List

from ..models import RawEntry
from ..config.reconciliation_config import RECONCILIATION_CONFIG
from ..normalisation.preprocess import coerce_percentage, normalize_whitespace

logger = logging.getLogger(__name__)


class OraclePayloadError(Exception):
    """Raised when an oracle payload cannot be read as an array of offer records."""
    pass


# Per-source defaults: (id prefix, category fallback, original text)
SOURCE_DEFAULTS = {
    "screenshot": ("screenshot", RECONCILIATION_CONFIG["fallback_category"], None),
    "comment": ("context", RECONCILIATION_CONFIG["manual_category"], "Added via comment"),
    "refinement": ("refined", RECONCILIATION_CONFIG["manual_category"], "Refined by user"),
    "api": ("api", RECONCILIATION_CONFIG["fallback_category"], None),
}


def _generate_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


def coerce_raw_entries(items: List[Any], source: str = "api") -> List[RawEntry]:
    """
    Convert oracle records into raw entries.

    Args:
        items: List of record dicts
        source: One of SOURCE_DEFAULTS ("screenshot", "comment", "refinement", "api")

    Returns:
        List of RawEntry, one per record

    Raises:
        OraclePayloadError: If items is not a list of objects
        ValueError: If the source is unknown
    """
    if source not in SOURCE_DEFAULTS:
        raise ValueError(f"Unknown oracle source: {source!r}")
    if not isinstance(items, list):
        raise OraclePayloadError(f"Expected a JSON array, got {type(items).__name__}")

    for idx, item in enumerate(items):
        if not isinstance(item, dict):
            raise OraclePayloadError(
                f"Record {idx} is {type(item).__name__}, expected an object"
            )

    prefix, category_fallback, default_text = SOURCE_DEFAULTS[source]
    fallback_bank = RECONCILIATION_CONFIG["fallback_bank"].value

    entries = []
    for item in items:
        bank_name = normalize_whitespace(item.get("bankName") if isinstance(item.get("bankName"), str) else None)
        category = normalize_whitespace(item.get("category") if isinstance(item.get("category"), str) else None)
        original_text = item.get("originalText")

        entries.append(RawEntry(
            id=str(item.get("id") or _generate_id(prefix)),
            bank_name=bank_name or fallback_bank,
            category=category or category_fallback,
            percentage=coerce_percentage(item.get("percentage")),
            original_text=original_text if isinstance(original_text, str) else default_text,
        ))

    return entries


def parse_oracle_payload(payload: Any, source: str = "screenshot") -> List[RawEntry]:
    """
    Parse an oracle response into raw entries.

    Args:
        payload: JSON text, UTF-8 bytes, or an already decoded list
        source: Oracle source, see SOURCE_DEFAULTS

    Returns:
        List of RawEntry (empty for an empty or blank response)

    Raises:
        OraclePayloadError: If the payload is not valid JSON or not an array of objects
    """
    if payload is None:
        return []

    if isinstance(payload, (bytes, bytearray)):
        try:
            payload = payload.decode("utf-8")
        except UnicodeDecodeError as e:
            raise OraclePayloadError(f"Payload is not UTF-8: {e}")

    if isinstance(payload, str):
        if not payload.strip():
            return []
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as e:
            raise OraclePayloadError(f"Invalid JSON: {e}")

    entries = coerce_raw_entries(payload, source=source)
    logger.debug(f"Parsed {len(entries)} entries from {source} payload")
    return entries


def raw_entry_to_dict(entry: RawEntry) -> dict:
    """Serialize a raw entry using the oracle field names."""
    record = {
        "id": entry.id,
        "bankName": entry.bank_name,
        "category": entry.category,
        "percentage": entry.percentage,
    }
    if entry.original_text is not None:
        record["originalText"] = entry.original_text
    return record
