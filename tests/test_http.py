import socket

import pytest

from filehttp.http import (
    MAX_BUFFER,
    NOT_FOUND_BODY,
    build_response,
    handle_client,
    mime_type,
    read_file,
    read_http_request,
)


def _recv_all(sock):
    chunks = []
    while True:
        chunk = sock.recv(4096)
        if not chunk:
            break
        chunks.append(chunk)
    return b"".join(chunks)


@pytest.mark.parametrize(
    "route, expected",
    [
        ("notes.txt", "text/plain"),
        ("index.html", "text/html"),
        ("style.css", "text/css"),
        ("anim.gif", "image/gif"),
        ("photo.jpeg", "image/jpeg"),
        ("icon.png", "image/png"),
        ("pic.jpg", "image/jpg"),
        ("dir/archive.tar.html", "text/html"),
    ],
)
def test_mime_type_known(route, expected):
    assert mime_type(route) == expected


@pytest.mark.parametrize("route", ["archive.tar.gz", "noextension", "...", ""])
def test_mime_type_unknown(route):
    assert mime_type(route) is None


def test_build_response_format():
    response = build_response(200, "OK", "text/plain", 5, b"hello")
    assert response == b"HTTP/1.1 200 OK\nContent-Type: text/plain\nContent-Length: 5\n\nhello"


def test_build_response_accepts_text_body():
    assert build_response(404, "Not Found", "text/html", 3, "abc").endswith(b"\n\nabc")


def test_build_response_without_type_uses_fallback():
    response = build_response(200, "OK", None, 1, b"x")
    assert b"Content-Type: application/octet-stream\n" in response


def test_read_file_returns_bytes(tmp_path):
    target = tmp_path / "data.bin"
    target.write_bytes(b"a\0b\xff")
    assert read_file(str(target)) == b"a\0b\xff"


def test_read_file_missing_returns_none(tmp_path):
    assert read_file(str(tmp_path / "missing.txt")) is None


def test_read_http_request_stops_at_nul():
    a, b = socket.socketpair()
    with a, b:
        b.sendall(b"GET /a.txt HTTP/1.1\0trailing")
        assert read_http_request(a) == "GET /a.txt HTTP/1.1"


def test_read_http_request_limited_to_buffer():
    a, b = socket.socketpair()
    with a, b:
        b.sendall(b"x" * (MAX_BUFFER * 2))
        assert len(read_http_request(a)) == MAX_BUFFER


def test_handle_client_serves_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    body = b"hello world"
    (tmp_path / "hello.txt").write_bytes(body)
    a, b = socket.socketpair()
    with b:
        b.sendall(b"GET /hello.txt HTTP/1.1\0")
        handle_client(a)
        data = _recv_all(b)
    assert data.startswith(b"HTTP/1.1 200 OK\nContent-Type: text/plain\n")
    assert data == build_response(200, "OK", "text/plain", len(body), body) + b"\0"


def test_handle_client_missing_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    a, b = socket.socketpair()
    with b:
        b.sendall(b"GET /nothing.html HTTP/1.1\0")
        result = handle_client(a)
        data = _recv_all(b)
    assert result is None
    assert data.startswith(b"HTTP/1.1 404 Not Found\n")
    expected = build_response(
        404, "Not Found", "text/html", len(NOT_FOUND_BODY), NOT_FOUND_BODY
    )
    assert data == expected + b"\0"


def test_handle_client_empty_request_sends_nothing():
    a, b = socket.socketpair()
    with b:
        b.shutdown(socket.SHUT_WR)
        result = handle_client(a)
        data = _recv_all(b)
    assert result is None
    assert data == b""