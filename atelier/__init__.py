"""Small classic programs: a linked list, date tools, CRCs, sockets, a web server, 2048 and curses toys."""

__version__ = "0.1.0"