"""A tiny static-file HTTP server answering simple GET requests."""

from __future__ import annotations

import itertools
import os
import re
import socket
import sys
import threading
from collections.abc import Sequence
from typing import Union

__all__ = [
    "RequestRejected",
    "content_type",
    "parse_request",
    "check_directory",
    "handle_connection",
    "usage",
    "serve",
    "main",
    "BUFSIZE",
    "EXTENSIONS",
    "LOG_FILE",
]

BUFSIZE = 8096
LOG_FILE = "server.log"
MAX_PORT = 60000

EXTENSIONS: tuple[tuple[str, str], ...] = (
    ("gif", "image/gif"),
    ("jpg", "image/jpeg"),
    ("jpeg", "image/jpeg"),
    ("png", "image/png"),
    ("zip", "image/zip"),
    ("gz", "image/gz"),
    ("tar", "image/tar"),
    ("htm", "text/html"),
    ("html", "text/html"),
    ("php", "image/php"),
    ("cgi", "text/cgi"),
    ("asp", "text/asp"),
    ("jsp", "image/jsp"),
    ("xml", "text/xml"),
    ("js", "text/js"),
    ("css", "test/css"),
)

FORBIDDEN_DIRECTORIES = frozenset({"/", "/etc", "/bin", "/lib", "/tmp", "/usr", "/dev", "/sbin"})

PathLike = Union[str, "os.PathLike[str]"]


class RequestRejected(Exception):
    """A request the server refuses; ``reason`` and ``detail`` go to the client."""

    def __init__(self, reason: str, detail: str = "") -> None:
        super().__init__(f"{reason}:{detail}")
        self.reason = reason
        self.detail = detail


def content_type(path: str) -> str | None:
    """The content type for the first extension ``path`` ends with, if any."""
    return next((kind for ext, kind in EXTENSIONS if path.endswith(ext)), None)


def _request_text(data: bytes) -> str:
    """The request as it is logged: line breaks shown as ``*``.

    A request that fills the whole read buffer counts as empty.
    """
    if len(data) >= BUFSIZE:
        return ""
    text = data.decode("latin-1").split("\0", 1)[0]
    return text.replace("\r", "*").replace("\n", "*")


def _parse(data: bytes) -> tuple[str, str]:
    """The request line up to the path's end, and the requested file path."""
    if not data:
        raise RequestRejected("failed to read browser request", "")
    text = _request_text(data)
    if not (text.startswith("GET ") or text.startswith("get ")):
        raise RequestRejected("Only simple GET operation supported", text)
    end = text.find(" ", 4)
    line = text if end == -1 else text[:end]
    if ".." in line:
        raise RequestRejected("Parent directory (..) path names not supported", line)
    if line in ("GET /", "get /"):
        line = "GET /index.html"
    return line, line[5:]


def parse_request(data: bytes) -> str:
    """The file a GET request asks for; ``/`` means ``index.html``."""
    return _parse(data)[1]


def check_directory(path: str) -> str:
    """Return ``path`` unless it is a system directory that must not be served."""
    if path in FORBIDDEN_DIRECTORIES:
        raise ValueError(f"Bad top directory {path}, see server -?")
    return path


def _log(log_path: PathLike, line: str) -> None:
    try:
        with open(log_path, "a", encoding="latin-1", errors="replace") as handle:
            handle.write(line + "\n")
    except OSError:
        pass


def _log_error(log_path: PathLike, what: str, detail: str, errno: int | None) -> None:
    _log(log_path, f"ERROR: {what}:{detail} Errno={errno or 0} exiting pid={os.getpid()}")


def _sorry_page(exc: RequestRejected) -> bytes:
    return (
        f"<HTML><BODY><H1>Web Server Sorry: {exc.reason} {exc.detail}</H1></BODY></HTML>\r\n"
    ).encode("latin-1", errors="replace")


def handle_connection(conn: socket.socket, hit: int, log_path: PathLike = LOG_FILE) -> bool:
    """Answer one request on ``conn``; True when a file was sent.

    Files are looked up relative to the working directory. Refused requests
    get an HTML apology and a ``SORRY`` line in the log.
    """
    try:
        data = conn.recv(BUFSIZE)
    except OSError:
        data = b""
    try:
        if data:
            _log(log_path, f" INFO: request:{_request_text(data)}:{hit}")
        line, path = _parse(data)
        kind = content_type(line)
        if kind is None:
            raise RequestRejected("file extension type not supported", line)
        try:
            handle = open(path, "rb")
        except OSError:
            raise RequestRejected("failed to open file", path) from None
    except RequestRejected as exc:
        try:
            conn.sendall(_sorry_page(exc))
        except OSError:
            pass
        _log(log_path, f"SORRY: {exc.reason}:{exc.detail}")
        return False

    with handle:
        _log(log_path, f" INFO: SEND:{path}:{hit}")
        conn.sendall(f"HTTP/1.0 200 OK\r\nContent-Type: {kind}\r\n\r\n".encode("latin-1"))
        while chunk := handle.read(BUFSIZE):
            conn.sendall(chunk)
    return True


def usage() -> str:
    """Help text listing the supported extensions and refused directories."""
    supported = "".join(f" {ext}" for ext, _ in EXTENSIONS)
    return (
        "usage: server [port] [server directory] &"
        "\tExample: server 80 ./ &\n\n"
        "\tOnly Supports:"
        f"{supported}"
        "\n\tNot Supported: directories / /etc /bin /lib /tmp /usr /dev /sbin \n"
    )


def _serve_client(conn: socket.socket, hit: int) -> None:
    with conn:
        try:
            handle_connection(conn, hit, LOG_FILE)
        except OSError:
            pass


def serve(port: int, directory: PathLike) -> None:
    """Serve files from ``directory``, which becomes the working directory, forever.

    Errors are logged to ``server.log`` before being raised.
    """
    os.chdir(directory)
    _log(LOG_FILE, f" INFO: http server starting:{port}:{os.getpid()}")
    try:
        listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except OSError as exc:
        _log_error(LOG_FILE, "system call", "socket", exc.errno)
        raise
    with listener:
        if port < 0 or port > MAX_PORT:
            _log_error(LOG_FILE, "Invalid port number try [1,60000]", str(port), 0)
            raise ValueError(f"Invalid port number {port}, try [1,60000]")
        for step, action in (
            ("bind", lambda: listener.bind(("", port))),
            ("listen", lambda: listener.listen(64)),
        ):
            try:
                action()
            except OSError as exc:
                _log_error(LOG_FILE, "system call", step, exc.errno)
                raise
        for hit in itertools.count(1):
            try:
                conn, _ = listener.accept()
            except OSError as exc:
                _log_error(LOG_FILE, "system call", "accept", exc.errno)
                raise
            threading.Thread(target=_serve_client, args=(conn, hit), daemon=True).start()


_ATOI = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2 or args[0] == "-?":
        sys.stdout.write(usage())
        return 0
    port_text, directory = args
    try:
        check_directory(directory)
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return 3
    try:
        os.chdir(directory)
    except OSError:
        print(f"ERROR: Can't Change to directory {directory}")
        return 4
    try:
        serve(_atoi(port_text), os.getcwd())
    except (OSError, ValueError):
        return 3
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    raise SystemExit(main())