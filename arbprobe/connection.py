"""WebSocket reachability probes for crypto exchanges.

Each connection opens a TLS stream to the exchange, sends a WebSocket
upgrade request, and reports whether the server switched protocols.
The stream is closed straight after the check.
"""

from __future__ import annotations

import contextlib
import socket
import ssl
import sys
from typing import Callable, ClassVar, Optional, Protocol, TextIO, Union

HTTPS_PORT = 443
WEBSOCKET_KEY = "dGhlIHNhbXBsZSBub25jZQ=="
SWITCHING_PROTOCOLS = "101 Switching Protocols"
RESPONSE_LIMIT = 1023


class Stream(Protocol):
    """The part of a socket that a probe uses."""

    def sendall(self, data: bytes) -> None: ...

    def recv(self, bufsize: int) -> bytes: ...

    def close(self) -> None: ...


Transport = Callable[[str, int, Optional[float]], Stream]


def build_handshake(host_header: str, path: str) -> bytes:
    """Return the HTTP upgrade request for a WebSocket at ``path``."""
    lines = [
        f"GET {path} HTTP/1.1",
        f"Host: {host_header}",
        "Upgrade: websocket",
        "Connection: Upgrade",
        f"Sec-WebSocket-Key: {WEBSOCKET_KEY}",
        "Sec-WebSocket-Version: 13",
        "",
        "",
    ]
    return "\r\n".join(lines).encode("ascii")


def handshake_succeeded(response: Union[bytes, str]) -> bool:
    """Tell whether a server reply accepts the WebSocket upgrade."""
    if isinstance(response, bytes):
        response = response.decode("latin-1")
    # The reply is read as a C-style string: anything after a NUL is ignored.
    text = response.split("\0", 1)[0]
    return SWITCHING_PROTOCOLS in text


def _open_tls(host: str, port: int, timeout: Optional[float]) -> Stream:
    """Resolve ``host``, connect over IPv4 and complete a TLS handshake.

    ``timeout`` bounds only the TCP connect; the stream is blocking after it.
    Certificates are not verified.
    """
    infos = socket.getaddrinfo(host, port, socket.AF_INET, socket.SOCK_STREAM)
    address = infos[0][4][0]
    sock = socket.create_connection((address, port), timeout=timeout)
    sock.settimeout(None)
    context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    try:
        return context.wrap_socket(sock, server_hostname=host)
    except BaseException:
        sock.close()
        raise


class ExchangeConnection:
    """A one-shot WebSocket handshake check against one exchange."""

    name: ClassVar[str] = ""
    host: ClassVar[str] = ""
    path: ClassVar[str] = "/"
    host_header: ClassVar[Optional[str]] = None
    connect_timeout: ClassVar[Optional[float]] = None
    handshake_label: ClassVar[str] = ""
    ready_message: ClassVar[str] = ""

    def __init__(
        self,
        *,
        transport: Optional[Transport] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        self._transport: Transport = transport or _open_tls
        self._out = out
        self._connected = False
        self._say(f"🔧 {self.name} WebSocket connection initialized")

    @property
    def connected(self) -> bool:
        """Whether the last successful probe has not yet been disconnected."""
        return self._connected

    def _say(self, message: str) -> None:
        print(message, file=self._out if self._out is not None else sys.stdout, flush=True)

    def _fail(self, message: str) -> bool:
        self._say(f"❌ {message}")
        return False

    def connect(self) -> bool:
        """Probe the exchange; return True if the upgrade was accepted."""
        self._say(f"🔗 Connecting to {self.name} WebSocket...")
        try:
            stream = self._transport(self.host, HTTPS_PORT, self.connect_timeout)
        except socket.gaierror:
            return self._fail("Cannot resolve hostname")
        except TimeoutError:
            return self._fail("Connection timeout")
        except ssl.SSLError:
            return self._fail("SSL handshake failed")
        except OSError:
            if self.connect_timeout is None:
                return self._fail("Connection to server failed")
            return self._fail("Connection failed")

        with contextlib.closing(stream):
            request = build_handshake(self.host_header or self.host, self.path)
            try:
                stream.sendall(request)
            except OSError:
                return self._fail("Failed to send handshake")

            try:
                response = stream.recv(RESPONSE_LIMIT)
            except OSError:
                response = b""

            if response and handshake_succeeded(response):
                self._connected = True
                self._say(f"✅ {self.handshake_label}WebSocket handshake successful!")
                self._say(self.ready_message)
                return True

        return self._fail(f"{self.handshake_label}WebSocket handshake failed")

    def disconnect(self) -> None:
        """Mark the connection closed, announcing it if it was open."""
        if self._connected:
            self._connected = False
            self._say(f"🔌 {self.name} WebSocket disconnected")


class BinanceConnection(ExchangeConnection):
    """Binance futures WebSocket API."""

    name = "Binance"
    host = "ws-fapi.binance.com"
    path = "/ws-fapi/v1"
    ready_message = "🔗 Connected to Binance WebSocket stream"


class BitgetConnection(ExchangeConnection):
    """Bitget futures WebSocket stream."""

    name = "Bitget"
    host = "ws.bitgetapi.com"
    path = "/mix/v1/stream"
    connect_timeout = 5.0
    handshake_label = "Bitget "
    ready_message = "🚀 Ready for HFT - No threads, async I/O only"


class HyperliquidConnection(ExchangeConnection):
    """Hyperliquid WebSocket API."""

    name = "Hyperliquid"
    host = "api.hyperliquid.xyz"
    path = "/ws"
    host_header = "wss://api.hyperliquid.xyz/ws"
    handshake_label = "Hyperliquid "
    ready_message = "🔗 Connected to Hyperliquid WebSocket stream"


class OKXConnection(ExchangeConnection):
    """OKX public WebSocket API."""

    name = "OKX"
    host = "ws.okx.com"
    path = "/ws/v5/public"
    connect_timeout = 5.0
    handshake_label = "OKX "
    ready_message = "🚀 Ready for HFT - No threads, async I/O only"