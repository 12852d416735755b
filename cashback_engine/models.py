"""
Data model for the Cashback Matrix Reconciliation Engine.
Raw offers, normalized offers, bank configuration and the derived matrix.
"""

from typing import Any, Dict, FrozenSet, Optional, Tuple
from dataclasses import dataclass, field
from enum import Enum


class Bank(Enum):
    """Canonical bank tags."""
    SBER = "Sber"
    T_BANK = "T-Bank"
    ALFA = "Alfa"
    VTB = "VTB"
    YANDEX = "Yandex"
    OTHER = "Other"

    @classmethod
    def from_label(cls, label: str) -> "Bank":
        """
        Resolve an exact canonical label such as "T-Bank" or "vtb".

        Raises:
            ValueError: If the label is not a canonical bank name
        """
        if isinstance(label, Bank):
            return label
        text = (label or "").strip().casefold()
        for bank in cls:
            if bank.value.casefold() == text:
                return bank
        raise ValueError(f"Unknown bank: {label!r}")


@dataclass(frozen=True)
class RawEntry:
    """Unverified offer produced by an extraction or rewrite oracle."""
    id: str
    bank_name: str
    category: str
    percentage: Any = 0.0
    original_text: Optional[str] = None


@dataclass(frozen=True)
class NormalizedEntry:
    """Offer with a canonical bank tag and a category key used for equality."""
    bank: Bank
    category_key: str
    category_display: str
    percentage: float
    source_id: Optional[str] = None

    @property
    def offer_key(self) -> Tuple[Bank, str]:
        return (self.bank, self.category_key)


@dataclass(frozen=True)
class BankConfig:
    """Per-bank settings owned by the configuration surface."""
    enabled: bool = True
    limit: int = 5
    display_color: str = ""


@dataclass(frozen=True)
class MatrixCell:
    """Known offer for one (category, bank) pair."""
    bank: Bank
    percentage: float
    is_selected: bool = False
    is_winner: bool = False


@dataclass(frozen=True)
class MatrixRow:
    """One category row; cells map every enabled bank (column order) to an optional cell."""
    category_key: str
    category_display: str
    cells: Dict[Bank, Optional[MatrixCell]] = field(default_factory=dict)
    winners: Tuple[Bank, ...] = ()

    def present_cells(self) -> Tuple[MatrixCell, ...]:
        return tuple(cell for cell in self.cells.values() if cell is not None)

    def winner_cells(self) -> Tuple[MatrixCell, ...]:
        return tuple(self.cells[bank] for bank in self.winners)


@dataclass(frozen=True)
class ReconciliationResult:
    """Complete output of one reconciliation pass."""
    banks: Tuple[Bank, ...] = ()
    rows: Tuple[MatrixRow, ...] = ()
    entries: Tuple[NormalizedEntry, ...] = ()
    selections: FrozenSet[Tuple[Bank, str]] = frozenset()

    @property
    def winning_rows(self) -> Tuple[MatrixRow, ...]:
        return tuple(row for row in self.rows if row.winners)
