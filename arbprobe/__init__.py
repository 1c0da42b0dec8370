"""Reachability probes for exchange WebSocket endpoints, with a command for Binance and Bitget."""

__version__ = "0.1.0"
__all__ = ["__version__"]