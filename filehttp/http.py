"""Request parsing and response building for the static file server."""

from __future__ import annotations

import socket
import sys

MAX_BUFFER = 1024

STATUS_OK = 200
STATUS_NOT_FOUND = 404

NOT_FOUND_BODY = b"<h1>404 Not Found</h1>"
DEFAULT_CONTENT_TYPE = "application/octet-stream"

CONTENT_TYPES = {
    "txt": "text/plain",
    "html": "text/html",
    "css": "text/css",
    "gif": "image/gif",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "jpg": "image/jpg",
}


def mime_type(route: str) -> str | None:
    """Return the content type for the extension of *route*, or None if unknown."""
    parts = [part for part in route.split(".") if part]
    if not parts:
        return None
    return CONTENT_TYPES.get(parts[-1])


def read_http_request(sock: socket.socket) -> str:
    """Receive one request of at most MAX_BUFFER bytes, cut at the first NUL byte."""
    data = sock.recv(MAX_BUFFER)
    text = data.split(b"\0", 1)[0]
    return text.decode("utf-8", errors="replace")


def build_response(status, reason, content_type, content_length, body) -> bytes:
    """Build the raw bytes of an HTTP response."""
    if isinstance(body, str):
        body = body.encode("utf-8")
    if content_type is None:
        content_type = DEFAULT_CONTENT_TYPE
    head = (
        f"HTTP/1.1 {status} {reason}\n"
        f"Content-Type: {content_type}\n"
        f"Content-Length: {content_length}\n\n"
    )
    return head.encode("latin-1") + bytes(body)


def read_file(route: str) -> bytes | None:
    """Return the contents of the file at *route*, or None if it cannot be read."""
    try:
        with open(route, "rb") as handle:
            return handle.read()
    except OSError as exc:
        print(f"ERROR::readFiles(): {exc}", file=sys.stderr)
        return None


def handle_client(sock: socket.socket) -> None:
    """Answer a single request on *sock* with the requested file, then close it."""
    with sock:
        try:
            request = read_http_request(sock)
        except OSError as exc:
            print(f"ERROR::recv(): {exc}", file=sys.stderr)
            return
        if not request:
            return

        tokens = [token for token in request.split(" ") if token]
        route = tokens[1][1:] if len(tokens) > 1 else ""
        body = read_file(route) if route else None

        if body is not None:
            response = build_response(STATUS_OK, "OK", mime_type(route), len(body), body)
        else:
            response = build_response(
                STATUS_NOT_FOUND,
                "Not Found",
                "text/html",
                len(NOT_FOUND_BODY),
                NOT_FOUND_BODY,
            )

        try:
            sock.sendall(response + b"\0")
        except OSError as exc:
            print(f"ERROR::send(): {exc}", file=sys.stderr)