"""
Bank alias matching.

Resolves free-text bank names to canonical tags using an ordered alias table.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from ..models import Bank
from ..patterns.bank_aliases import BANK_ALIAS_PATTERNS, LEGACY_BANK_ALIAS_PATTERNS


@dataclass(frozen=True)
class AliasPolicy:
    """Alias table plus the case rule used when matching it."""
    patterns: Tuple[Tuple[str, Bank], ...]
    case_sensitive: bool = False
    name: str = "custom"


DEFAULT_ALIAS_POLICY = AliasPolicy(
    patterns=tuple(BANK_ALIAS_PATTERNS),
    case_sensitive=False,
    name="default",
)

LEGACY_ALIAS_POLICY = AliasPolicy(
    patterns=tuple(LEGACY_BANK_ALIAS_PATTERNS),
    case_sensitive=True,
    name="legacy",
)

ALIAS_POLICIES = {
    DEFAULT_ALIAS_POLICY.name: DEFAULT_ALIAS_POLICY,
    LEGACY_ALIAS_POLICY.name: LEGACY_ALIAS_POLICY,
}


def get_alias_policy(name: Optional[str]) -> AliasPolicy:
    """
    Look up a named alias policy.

    Raises:
        ValueError: If the policy name is not a string or is unknown
    """
    if name is None or name == "":
        return DEFAULT_ALIAS_POLICY
    if not isinstance(name, str) or name not in ALIAS_POLICIES:
        raise ValueError(
            f"Unknown alias policy: {name!r}. Expected one of {sorted(ALIAS_POLICIES)}"
        )
    return ALIAS_POLICIES[name]


def _fold(text: str, case_sensitive: bool) -> str:
    return text if case_sensitive else text.casefold()


def match_bank_alias(bank_name: str, policy: AliasPolicy = DEFAULT_ALIAS_POLICY) -> Optional[Bank]:
    """
    Match a bank name against the policy's alias table.

    Args:
        bank_name: Trimmed bank name
        policy: Alias policy to apply

    Returns:
        Canonical bank if an alias occurs in the name, None otherwise

    Example:
        >>> match_bank_alias("Тинькофф Black")
        <Bank.T_BANK: 'T-Bank'>
    """
    if not bank_name:
        return None

    text = _fold(bank_name, policy.case_sensitive)
    for pattern, canonical in policy.patterns:
        if _fold(pattern, policy.case_sensitive) in text:
            return canonical
    return None


def canonicalize_bank(
    bank_name: Optional[str],
    policy: AliasPolicy = DEFAULT_ALIAS_POLICY,
    fallback: Bank = Bank.OTHER
) -> Bank:
    """
    Resolve a free-text bank name to a canonical tag.

    Exact canonical labels always resolve, then the alias table is tried,
    and anything unmatched becomes the fallback (Other).
    """
    name = (bank_name or "").strip() if isinstance(bank_name, str) else ""
    if not name:
        return fallback

    for bank in Bank:
        if name == bank.value or (not policy.case_sensitive and name.casefold() == bank.value.casefold()):
            return bank

    matched = match_bank_alias(name, policy)
    return matched if matched is not None else fallback

