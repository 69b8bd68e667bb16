"""Send a text file over TCP in fixed-size, zero-padded blocks and write it back out."""

from __future__ import annotations

import argparse
import os
import socket
import sys
from collections.abc import Iterator, Sequence
from typing import BinaryIO, Union

__all__ = ["send_file", "receive_file", "server_main", "client_main", "BLOCK_SIZE"]

BLOCK_SIZE = 1024
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080

PathLike = Union[str, "os.PathLike[str]"]


def _lines(handle: BinaryIO) -> Iterator[bytes]:
    """Lines of at most BLOCK_SIZE - 1 bytes; longer lines are split."""
    while chunk := handle.readline(BLOCK_SIZE - 1):
        yield chunk


def send_file(path: PathLike, sock: socket.socket) -> int:
    """Send the file line by line, each line padded with zeros to one block.

    Returns the number of file bytes sent.
    """
    sent = 0
    with open(path, "rb") as handle:
        for line in _lines(handle):
            sock.sendall(line.ljust(BLOCK_SIZE, b"\0"))
            sent += len(line)
    return sent


def _blocks(sock: socket.socket) -> Iterator[bytes]:
    pending = b""
    while data := sock.recv(BLOCK_SIZE):
        pending += data
        while len(pending) >= BLOCK_SIZE:
            yield pending[:BLOCK_SIZE]
            pending = pending[BLOCK_SIZE:]
    if pending:
        yield pending


def receive_file(sock: socket.socket, path: PathLike) -> int:
    """Read blocks until the peer closes and write their text to ``path``.

    Each block contributes the bytes before its first zero byte.
    Returns the number of bytes written.
    """
    written = 0
    with open(path, "wb") as handle:
        for block in _blocks(sock):
            text = block.split(b"\0", 1)[0]
            handle.write(text)
            written += len(text)
    return written


def server_main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Receive one file over TCP.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--output", default="recv.txt")
    args = parser.parse_args(argv)

    try:
        server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except OSError as exc:
        print(f"[-]Error in socket: {exc}", file=sys.stderr)
        return 1
    with server:
        print("[+]Server socket created successfully.")
        try:
            server.bind((args.host, args.port))
        except OSError as exc:
            print(f"[-]Error in bind: {exc}", file=sys.stderr)
            return 1
        print("[+]Binding successfull.")
        try:
            server.listen(10)
        except OSError as exc:
            print(f"[-]Error in listening: {exc}", file=sys.stderr)
            return 1
        print("[+]Listening....", flush=True)
        conn, _ = server.accept()
        with conn:
            receive_file(conn, args.output)
    print("[+]Data written in the file successfully.")
    return 0


def client_main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Send one file over TCP.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--file", default="send.txt")
    args = parser.parse_args(argv)

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except OSError as exc:
        print(f"[-]Error in socket: {exc}", file=sys.stderr)
        return 1
    with sock:
        print("[+]Server socket created successfully.")
        try:
            sock.connect((args.host, args.port))
        except OSError as exc:
            print(f"[-]Error in socket: {exc}", file=sys.stderr)
            return 1
        print("[+]Connected to Server.")
        try:
            send_file(args.file, sock)
        except OSError as exc:
            action = "reading" if exc.filename is not None else "sending"
            print(f"[-]Error in {action} file: {exc}", file=sys.stderr)
            return 1
        print("[+]File data sent successfully.")
        print("[+]Closing the connection.")
    return 0