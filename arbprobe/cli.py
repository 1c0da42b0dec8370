"""Command that checks both arbitrage exchanges are reachable."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from arbprobe.connection import BinanceConnection, BitgetConnection


def _report(name: str, ok: bool) -> None:
    if ok:
        print(f"✅ {name} connection successful!")
    else:
        print(f"❌ {name} connection failed!")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Probe Binance and Bitget, report the result, and wait for Enter."""
    parser = argparse.ArgumentParser(
        prog="arbprobe",
        description="Test WebSocket connections to Binance and Bitget.",
    )
    parser.parse_args(argv)

    print("🤖 Starting Arbitrage Bot...")

    binance = BinanceConnection()
    bitget = BitgetConnection()

    print("🔗 Testing connections to both exchanges...")

    binance_ok = binance.connect()
    _report("Binance", binance_ok)

    bitget_ok = bitget.connect()
    _report("Bitget", bitget_ok)

    if binance_ok and bitget_ok:
        print("🚀 Both exchanges connected! Ready for arbitrage...")
        print("📊 Binance + Bitget arbitrage opportunities available")
    else:
        print("⚠️  Some connections failed. Check network and try again.")

    print("Press Enter to exit...", flush=True)
    sys.stdin.readline()

    binance.disconnect()
    bitget.disconnect()
    return 0


if __name__ == "__main__":
    sys.exit(main())