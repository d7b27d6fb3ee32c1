"""Display hints (emoji icon, Tailwind gradient) attached to tokens."""

from __future__ import annotations

from typing import Dict, List, Tuple

_DEFAULT_ICON = "🪙"
_DEFAULT_COLOR = "from-gray-400 to-gray-600"

_BLUE = "from-blue-400 to-blue-600"
_BTC = "from-yellow-400 to-orange-500"
_PURPLE = "from-purple-400 to-purple-600"
_GREEN = "from-green-400 to-green-600"
_YELLOW = "from-yellow-400 to-yellow-600"

# key -> (icon, color); keys match lower-cased symbols or names.
_TOKEN_STYLES: Dict[str, Tuple[str, str]] = {
    "eth": ("🔵", _BLUE),
    "ethereum": ("🔵", _BLUE),
    "btc": ("🟡", _BTC),
    "bitcoin": ("🟡", _BTC),
    "usdc": ("💙", "from-blue-400 to-cyan-500"),
    "usdt": ("💚", _GREEN),
    "dai": ("🟡", _YELLOW),
    "matic": ("🟣", _PURPLE),
    "polygon": ("🟣", _PURPLE),
    "link": ("🔗", "from-blue-500 to-blue-700"),
    "chainlink": ("🔗", "from-blue-500 to-blue-700"),
    "uni": ("🦄", "from-pink-400 to-purple-600"),
    "uniswap": ("🦄", "from-pink-400 to-purple-600"),
    "aave": ("🟢", _GREEN),
    "comp": ("🔵", _BLUE),
    "compound": ("🔵", _BLUE),
    "sushi": ("🍣", "from-pink-400 to-red-500"),
    "sushiswap": ("🍣", "from-pink-400 to-red-500"),
    "crv": ("🟠", "from-orange-400 to-orange-600"),
    "curve": ("🟠", "from-orange-400 to-orange-600"),
    "bal": ("🔵", _BLUE),
    "balancer": ("🔵", _BLUE),
    "yfi": ("🟡", _YELLOW),
    "yearn": ("🟡", _YELLOW),
    "snx": ("🟣", _PURPLE),
    "synthetix": ("🟣", _PURPLE),
    "ren": ("🟢", _GREEN),
    "renvm": ("🟢", _GREEN),
    "1inch": ("🔵", _BLUE),
    "wbtc": ("🟡", _BTC),
    "weth": ("🔵", _BLUE),
}

# Checked in order against the lower-cased name.
_KEYWORD_STYLES: List[Tuple[Tuple[str, ...], Tuple[str, str]]] = [
    (("usd", "stable"), ("💵", _GREEN)),
    (("wrapped", "w"), ("📦", _DEFAULT_COLOR)),
    (("governance", "gov"), ("🗳️", _PURPLE)),
    (("liquidity", "lp"), ("💧", "from-blue-400 to-cyan-500")),
]


def _style_for(symbol: str, name: str) -> Tuple[str, str]:
    symbol_lower = (symbol or "").lower()
    name_lower = (name or "").lower()

    for key in (symbol_lower, name_lower):
        if key in _TOKEN_STYLES:
            return _TOKEN_STYLES[key]

    for keywords, style in _KEYWORD_STYLES:
        if any(keyword in name_lower for keyword in keywords):
            return style

    return _DEFAULT_ICON, _DEFAULT_COLOR


def token_icon(symbol: str, name: str) -> str:
    return _style_for(symbol, name)[0]


def token_color(symbol: str, name: str) -> str:
    return _style_for(symbol, name)[1]


__all__ = ["token_icon", "token_color"]
