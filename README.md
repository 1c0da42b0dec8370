# arbprobe

arbprobe checks whether the WebSocket endpoints of cryptocurrency exchanges
can be reached. For each exchange it resolves the host over IPv4, opens a TLS
connection to it, sends a WebSocket upgrade request and looks for a
`101 Switching Protocols` answer in the reply. The connection is closed as
soon as the check is done. Run it before you start an arbitrage strategy, so
that you know the venues it depends on are up.

## Installation

```
pip install .
```

The package uses only the standard library.

## Command line

```
arbprobe
```

The command tests Binance and Bitget and prints one line per exchange. When
both succeed it reports that arbitrage between them is possible; if either
fails it asks you to check the network. It then waits for Enter, marks both
connections as disconnected and exits with status 0. It takes no options
besides `--help`.

## Library use

```python
from arbprobe.connection import BinanceConnection, OKXConnection

okx = OKXConnection()
if okx.connect():
    print("OKX is reachable")
okx.disconnect()
```

Module `arbprobe.connection` provides:

- `BinanceConnection`, `BitgetConnection`, `HyperliquidConnection` and
  `OKXConnection`, all derived from `ExchangeConnection`.
- `ExchangeConnection.connect()` returns `True` when the WebSocket upgrade is
  accepted and `False` on any failure (name resolution, TCP connect, TLS
  handshake, sending the request, or a reply without `101 Switching
  Protocols`). Bitget and OKX give up on the TCP connect after 5 seconds.
- `ExchangeConnection.disconnect()` clears the connected state, printing a
  message if the connection was marked as open.
- The read-only property `connected` tells whether the last successful
  `connect()` has not yet been followed by `disconnect()`.
- `build_handshake(host_header, path)` returns the upgrade request as bytes.
- `handshake_succeeded(response)` takes the reply as `bytes` or `str` and
  tells whether it accepts the upgrade.

Every connection prints its progress. The constructor takes two keyword
arguments: `out`, a text stream to print to instead of standard output, and
`transport`, a callable `(host, port, timeout)` returning an object with
`sendall`, `recv` and `close`, used in place of the built-in TLS opener.

## What it does not do

arbprobe only checks reachability. It does not keep a connection open,
subscribe to market data, read prices, look for arbitrage opportunities or
place orders. TLS certificates are not verified, and every upgrade request
uses the same fixed `Sec-WebSocket-Key`.

## Running the tests

```
pip install ".[test]"
pytest
```