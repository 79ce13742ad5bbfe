"""Threaded static file server with an interactive command prompt."""

from __future__ import annotations

import socket
import subprocess
import sys
import threading

from filehttp.http import handle_client

LISTEN_QUEUE = 10
ACCEPT_POLL = 0.2

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 2569

END = "/end"
CLEAR = "/cls"


def _clear_screen() -> None:
    try:
        result = subprocess.run(["clear"], check=False)
    except OSError as exc:
        print(f"ERROR SYSTEM: {exc}", file=sys.stderr)
        return
    if result.returncode != 0:
        print("ERROR SYSTEM", file=sys.stderr)


class Server:
    """A listening socket that hands every connection to its own thread."""

    def __init__(self, host=DEFAULT_HOST, port=DEFAULT_PORT):
        self.host = host
        self.port = port
        self.running = False
        self._sock: socket.socket | None = None

    def start(self) -> None:
        """Bind and listen; raises OSError if either fails."""
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            sock.bind((self.host, self.port))
            sock.listen(LISTEN_QUEUE)
        except OSError:
            sock.close()
            raise
        sock.settimeout(ACCEPT_POLL)
        self._sock = sock
        self.port = sock.getsockname()[1]
        self.running = True

    def wait_connection(self) -> None:
        """Accept connections until the server stops running."""
        while self.running:
            sock = self._sock
            if sock is None or sock.fileno() == -1:
                break
            try:
                client, _ = sock.accept()
            except socket.timeout:
                continue
            except OSError:
                if not self.running:
                    break
                print("ERROR::accept()", file=sys.stderr)
                continue
            threading.Thread(target=handle_client, args=(client,), daemon=True).start()

    def command(self, cmd: str) -> bool:
        """Run a prompt command; return False if it is not known."""
        if cmd == END:
            print("THE SERVER IS NOT ACCEPTING ANY MORE CONNECTIONS")
            self.close()
            return True
        if cmd == CLEAR:
            _clear_screen()
            print(self.banner(), end="")
            return True
        return False

    def banner(self) -> str:
        """Return the start-up banner with the server's address."""
        return f"SERVER STARTED\nIP:PORT = {self.host}:{self.port}\n\n"

    def close(self) -> None:
        """Stop accepting connections and release the socket."""
        self.running = False
        if self._sock is not None:
            self._sock.close()


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) == 2:
        host = args[0]
        try:
            port = int(args[1])
        except ValueError:
            print(f"ERROR INVALID PORT: {args[1]}")
            return 1
    elif not args:
        host, port = DEFAULT_HOST, DEFAULT_PORT
    else:
        print("ERROR AND EXPECTED 2 ARGS\nEx.: 'IP PORT'")
        return 1

    server = Server(host, port)
    try:
        server.start()
    except OSError as exc:
        print(f"startServer(): {exc}", file=sys.stderr)
        return 1

    threading.Thread(target=server.wait_connection, daemon=True).start()

    _clear_screen()
    print(server.banner(), end="")

    while server.running:
        try:
            line = input(">> ")
        except EOFError:
            server.close()
            break
        words = line.split()
        if not words:
            continue
        if not server.command(words[0][:4]):
            print("[COMMAND NOT FOUND]\n")

    print("SERVER OFFLINE")
    return 0