import io
import socket
import ssl
from unittest import mock

from arbprobe.cli import main


class FakeTLS:
    def __init__(self, reply):
        self.reply = reply
        self.sent = []

    def sendall(self, data):
        self.sent.append(data)

    def recv(self, bufsize):
        return self.reply

    def close(self):
        pass


def test_both_fail_when_hosts_do_not_resolve(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("\n"))
    with mock.patch("socket.getaddrinfo", side_effect=socket.gaierror("offline")):
        code = main([])
    out = capsys.readouterr().out
    assert code == 0
    assert "🤖 Starting Arbitrage Bot..." in out
    assert "❌ Binance connection failed!" in out
    assert "❌ Bitget connection failed!" in out
    assert "⚠️  Some connections failed. Check network and try again." in out
    assert "🔌" not in out


def test_both_succeed_and_disconnect(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    addr = [(socket.AF_INET, socket.SOCK_STREAM, 6, "", ("127.0.0.1", 443))]
    reply = b"HTTP/1.1 101 Switching Protocols\r\n\r\n"
    with mock.patch("socket.getaddrinfo", return_value=addr), mock.patch(
        "socket.create_connection", return_value=mock.MagicMock()
    ), mock.patch.object(ssl.SSLContext, "wrap_socket", side_effect=lambda *a, **k: FakeTLS(reply)):
        code = main([])
    out = capsys.readouterr().out
    assert code == 0
    assert "✅ Binance connection successful!" in out
    assert "✅ Bitget connection successful!" in out
    assert "🚀 Both exchanges connected! Ready for arbitrage..." in out
    assert out.index("Press Enter to exit...") < out.index("🔌 Binance WebSocket disconnected")
    assert "🔌 Bitget WebSocket disconnected" in out


def test_one_rejected_upgrade_reports_partial_failure(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("\n"))
    addr = [(socket.AF_INET, socket.SOCK_STREAM, 6, "", ("127.0.0.1", 443))]
    replies = iter([b"HTTP/1.1 101 Switching Protocols\r\n\r\n", b"HTTP/1.1 403 Forbidden\r\n\r\n"])
    with mock.patch("socket.getaddrinfo", return_value=addr), mock.patch(
        "socket.create_connection", return_value=mock.MagicMock()
    ), mock.patch.object(ssl.SSLContext, "wrap_socket", side_effect=lambda *a, **k: FakeTLS(next(replies))):
        main([])
    out = capsys.readouterr().out
    assert "✅ Binance connection successful!" in out
    assert "❌ Bitget connection failed!" in out
    assert "⚠️  Some connections failed. Check network and try again." in out