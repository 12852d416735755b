"""
In-memory cashback session.

Holds the accumulated raw entries and the bank configuration the user is
editing, and hands immutable snapshots of both to the reconciliation
pipeline. Nothing is persisted.
"""

import logging
from dataclasses import replace
from typing import Any, Dict, Mapping, Optional, Tuple

from ..models import Bank, BankConfig, RawEntry, ReconciliationResult
from ..config.reconciliation_config import DEFAULT_BANK_CONFIG, RECONCILIATION_CONFIG
from ..config.bank_config_loader import parse_limit
from ..normalisation.alias_matching import AliasPolicy
from ..pipeline import reconcile
from .oracle_payload import OraclePayloadError, parse_oracle_payload

logger = logging.getLogger(__name__)


class CashbackSession:
    """Accumulates oracle output and bank settings for one user session."""

    def __init__(
        self,
        bank_config: Optional[Mapping[Bank, BankConfig]] = None,
        alias_policy: Optional[AliasPolicy] = None
    ):
        """
        Initialize the session.

        Args:
            bank_config: Starting bank configuration (default: DEFAULT_BANK_CONFIG)
            alias_policy: Alias policy passed to every reconciliation
        """
        self.entries = []
        self.bank_config: Dict[Bank, BankConfig] = dict(
            bank_config if bank_config is not None else DEFAULT_BANK_CONFIG
        )
        self.alias_policy = alias_policy
        self.last_error: Optional[str] = None

    def add_extraction(self, payload: Any, source: str = "screenshot") -> int:
        """
        Append the entries of one extraction call.

        A malformed payload contributes nothing and leaves existing entries intact.

        Args:
            payload: Oracle response (JSON text, bytes or decoded list)
            source: "screenshot" or "comment"

        Returns:
            Number of entries added
        """
        try:
            new_entries = parse_oracle_payload(payload, source=source)
        except OraclePayloadError as e:
            self.last_error = str(e)
            logger.error(f"Rejected {source} payload: {e}")
            return 0

        self.last_error = None
        self.entries.extend(new_entries)
        logger.info(f"Added {len(new_entries)} {source} entries ({len(self.entries)} total)")
        return len(new_entries)

    def apply_refinement(self, payload: Any) -> bool:
        """
        Replace the dataset with the rewrite oracle's full output.

        Args:
            payload: Rewritten dataset; None means "no change"

        Returns:
            True if the dataset was replaced
        """
        if payload is None:
            return False

        try:
            refined = parse_oracle_payload(payload, source="refinement")
        except OraclePayloadError as e:
            self.last_error = str(e)
            logger.error(f"Rejected refinement payload, keeping {len(self.entries)} entries: {e}")
            return False

        self.last_error = None
        self.entries = list(refined)
        logger.info(f"Dataset replaced by refinement ({len(self.entries)} entries)")
        return True

    def toggle_bank(self, bank: Bank) -> bool:
        """
        Flip a bank's enabled flag, adding it with default settings if unknown.

        Returns:
            The new enabled state
        """
        current = self.bank_config.get(bank)
        if current is None:
            current = BankConfig(enabled=False, limit=RECONCILIATION_CONFIG["default_limit"])
        self.bank_config[bank] = replace(current, enabled=not current.enabled)
        return self.bank_config[bank].enabled

    def update_limit(self, bank: Bank, value: Any) -> bool:
        """
        Set a bank's Top-N limit from user input.

        Invalid or negative input is ignored.

        Returns:
            True if the limit was changed
        """
        if bank not in self.bank_config:
            logger.warning(f"Ignoring limit for unconfigured bank {bank.value}")
            return False
        try:
            limit = parse_limit(value)
        except ValueError as e:
            logger.warning(f"Ignoring limit for {bank.value}: {e}")
            return False

        self.bank_config[bank] = replace(self.bank_config[bank], limit=limit)
        return True

    def clear(self) -> None:
        """Drop all accumulated entries; configuration is kept."""
        self.entries = []
        self.last_error = None

    def snapshot(self) -> Tuple[Tuple[RawEntry, ...], Dict[Bank, BankConfig]]:
        """Immutable copy of the current entries and configuration."""
        return tuple(self.entries), dict(self.bank_config)

    def reconcile(self) -> ReconciliationResult:
        """Recompute the matrix from a fresh snapshot."""
        entries, config = self.snapshot()
        return reconcile(entries, config, alias_policy=self.alias_policy)
