"""Helpers for validating wallet addresses and chain identifiers."""

from __future__ import annotations

import re
from typing import Any, Optional

from ..errors import PortfolioValidationError

_EVM_ADDRESS_RE = re.compile(r"^0x[a-fA-F0-9]{40}$")

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


def is_valid_wallet_address(address: Any) -> bool:
    if not address or not isinstance(address, str):
        return False
    return bool(_EVM_ADDRESS_RE.fullmatch(address))


def require_wallet_address(address: Any) -> str:
    """Return ``address`` unchanged or raise ``PortfolioValidationError``."""

    if not is_valid_wallet_address(address):
        raise PortfolioValidationError("Invalid wallet address format")
    return address


def is_valid_chain_id(chain_id: Any) -> bool:
    return isinstance(chain_id, int) and not isinstance(chain_id, bool) and chain_id > 0


def require_chain_id(chain_id: Any) -> int:
    if not is_valid_chain_id(chain_id):
        raise PortfolioValidationError("Invalid chain ID")
    return chain_id


def parse_int_param(raw: Optional[str]) -> Optional[int]:
    """Parse an integer query parameter; ``None`` when absent or not an integer."""

    if raw is None:
        return None
    try:
        return int(str(raw).strip())
    except ValueError:
        return None


__all__ = [
    "ZERO_ADDRESS",
    "is_valid_wallet_address",
    "require_wallet_address",
    "is_valid_chain_id",
    "require_chain_id",
    "parse_int_param",
]
