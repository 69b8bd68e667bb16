"""A one-shot TCP greeting exchange between a client and a server."""

from __future__ import annotations

import argparse
import socket
import sys
from collections.abc import Sequence

__all__ = [
    "serve_once",
    "send_message",
    "server_main",
    "client_main",
    "BUFFER_SIZE",
    "DEFAULT_PORT",
    "CLIENT_GREETING",
    "SERVER_GREETING",
]

BUFFER_SIZE = 1024
DEFAULT_PORT = 8080
CLIENT_GREETING = "Hello from the client!"
SERVER_GREETING = "Hello from the server!"


def serve_once(server_socket: socket.socket, response: str) -> str:
    """Accept one connection, read its message, answer with ``response``.

    Returns the message received; raises ConnectionError if the client
    closed the connection without sending anything.
    """
    conn, _ = server_socket.accept()
    with conn:
        data = conn.recv(BUFFER_SIZE)
        if not data:
            raise ConnectionError("Error receiving message: connection closed by client")
        conn.sendall(response.encode())
    return data.decode("utf-8", errors="replace")


def send_message(host: str, port: int, message: str) -> str:
    """Send ``message`` to the server and return its reply."""
    with socket.create_connection((host, port)) as sock:
        sock.sendall(message.encode())
        data = sock.recv(BUFFER_SIZE)
    if not data:
        raise ConnectionError("Error receiving response: connection closed by server")
    return data.decode("utf-8", errors="replace")


def server_main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Answer one greeting over TCP.")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    try:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
            server.bind(("", args.port))
            server.listen(5)
            print(f"Server listening on port {args.port}...", flush=True)
            message = serve_once(server, SERVER_GREETING)
    except OSError as exc:
        print(f"Server error: {exc}", file=sys.stderr)
        return 1
    print(f"Received message from client: {message}")
    print(f"Response sent to client: {SERVER_GREETING}")
    return 0


def client_main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Send one greeting over TCP.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    try:
        reply = send_message(args.host, args.port, CLIENT_GREETING)
    except OSError as exc:
        print(f"Client error: {exc}", file=sys.stderr)
        return 1
    print("Connected to the server.")
    print(f"Message sent to the server: {CLIENT_GREETING}")
    print(f"Received response from server: {reply}")
    return 0