"""Interactive client that downloads files from the static file server."""

from __future__ import annotations

import argparse
import re
import socket
import subprocess
import sys
import time
from dataclasses import dataclass
from pathlib import Path

MAX_URL = 91
SIZE_BUFFER = 2500001
CONNECT_ATTEMPTS = 6
RETRY_DELAY = 1.0
DEFAULT_DOWNLOAD_DIR = "download"

END = "/end"
CLEAR = "/cls"

URL_PATTERN = re.compile(
    r"(https?://)([0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3})(:[0-9]{1,5})(/.*[^/])",
    re.DOTALL,
)


class UrlError(ValueError):
    """The URL does not have the form protocol://ip:port/path."""


class DownloadError(Exception):
    """The response could not be received or saved."""


class NotFoundError(DownloadError):
    """The server answered with 404."""


@dataclass(frozen=True)
class ParsedUrl:
    host: str
    port: int
    path: str


def _clear_screen() -> None:
    try:
        result = subprocess.run(["clear"], check=False)
    except OSError as exc:
        print(f"\n[ERROR SYSTEM: {exc}]\n", file=sys.stderr)
        return
    if result.returncode != 0:
        print("\n[ERROR SYSTEM]\n", file=sys.stderr)


def parse_url(uri: str) -> ParsedUrl:
    """Split *uri* into host, port and path; raise UrlError if it does not match."""
    match = URL_PATTERN.fullmatch(uri)
    if match is None:
        raise UrlError("ERROR URI ENTERED INCORRECTLY")
    port = int(match.group(3)[1:]) % 65536
    return ParsedUrl(host=match.group(2), port=port, path=match.group(4))


def create_request(path: str) -> str:
    """Return the request line for *path*."""
    return f"GET {path} HTTP/1.1"


def download(sock: socket.socket, path: str, directory=DEFAULT_DOWNLOAD_DIR) -> Path:
    """Receive a response from *sock* and save its body under *directory*."""
    chunks = []
    try:
        while chunk := sock.recv(SIZE_BUFFER):
            chunks.append(chunk)
    except OSError as exc:
        raise DownloadError("ERROR FAILED TO RECEIVE DATA") from exc
    data = b"".join(chunks)

    head, sep, body = data.partition(b"\n\n")
    if not sep:
        raise DownloadError("ERROR MALFORMED RESPONSE")
    fields = head.split(b"\n", 1)[0].split()
    if len(fields) < 2:
        raise DownloadError("ERROR MALFORMED RESPONSE")
    if fields[1] == b"404":
        raise NotFoundError("ERROR 404 NOT FOUND")

    segments = [segment for segment in path.split("/") if segment]
    if not segments:
        raise DownloadError("ERROR NO FILE NAME IN PATH")
    if body.endswith(b"\0"):
        body = body[:-1]

    target = Path(directory) / segments[-1]
    try:
        target.write_bytes(body)
    except OSError as exc:
        raise DownloadError(f"ERROR download(): {exc}") from exc
    return target


class Client:
    """Prompt state and connection handling for downloads."""

    def __init__(self, download_dir=DEFAULT_DOWNLOAD_DIR):
        self.download_dir = Path(download_dir)
        self.running = True

    def connect(self, target: ParsedUrl) -> socket.socket:
        """Connect to the server, retrying; raise ConnectionError when all tries fail."""
        last_error: OSError | None = None
        for attempt in range(CONNECT_ATTEMPTS):
            if attempt:
                time.sleep(RETRY_DELAY)
            try:
                return socket.create_connection((target.host, target.port))
            except OSError as exc:
                last_error = exc
        raise ConnectionError("TIME OUT::COULD NOT CONNECT TO THE SERVER") from last_error

    def command(self, cmd: str) -> bool:
        """Run a prompt command; return False if it is not known."""
        if cmd == END:
            self.running = False
            return True
        if cmd == CLEAR:
            _clear_screen()
            return True
        return False

    def fetch(self, uri: str) -> Path:
        """Download the file named by *uri* and return where it was saved."""
        target = parse_url(uri)
        with self.connect(target) as sock:
            sock.sendall(create_request(target.path).encode("utf-8") + b"\0")
            return download(sock, target.path, self.download_dir)


def _fetch_and_report(client: Client, uri: str) -> None:
    try:
        target = parse_url(uri)
    except UrlError as exc:
        print(f"\n[{exc}]\n")
        return
    try:
        sock = client.connect(target)
    except ConnectionError as exc:
        print(f"\n[{exc}]\n")
        return
    with sock:
        try:
            sock.sendall(create_request(target.path).encode("utf-8") + b"\0")
        except OSError:
            print("\n[ERROR SENDING REQUEST]\n")
            return
        try:
            download(sock, target.path, client.download_dir)
        except DownloadError as exc:
            print(f"\n[{exc}]\n")
            print("\n[ERROR DOWNLOADING]\n")
            return
    print(f"\n[FILE SAVED IN PATH: {client.download_dir}]\n")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Download files from the file server.")
    parser.parse_args(argv)

    client = Client()
    while client.running:
        try:
            line = input(">> ")
        except EOFError:
            break
        words = line.split()
        if not words:
            continue
        token = words[0][: MAX_URL - 1]
        if token.startswith("/"):
            if not client.command(token):
                print("\n[COMMAND NOT FOUND]\n")
            continue
        _fetch_and_report(client, token)

    print("\n[CLOSED BROWSER]\n")
    return 0