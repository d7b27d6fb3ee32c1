"""HashHunt backend: 1inch portfolio, market data and mission verification API."""

__version__ = "0.1.0"
