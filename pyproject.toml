[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "atelier"
version = "0.1.0"
description = "A workshop of small classic programs: a linked list, date arithmetic, CRCs, TCP sockets, a static web server, a terminal 2048 game and curses toys."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "algorithms",
    "linked-list",
    "crc",
    "sockets",
    "curses",
    "2048",
    "http",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
atelier-list = "atelier.list_menu:main"
atelier-calendar = "atelier.calendar_tools:main"
atelier-digit-sum = "atelier.digit_sum:main"
atelier-crc = "atelier.crc:main"
atelier-hello-server = "atelier.hello_socket:server_main"
atelier-hello-client = "atelier.hello_socket:client_main"
atelier-transfer-server = "atelier.file_transfer:server_main"
atelier-transfer-client = "atelier.file_transfer:client_main"
atelier-2048 = "atelier.game2048.app:main"
atelier-web = "atelier.webserver:main"
atelier-clock = "atelier.big_clock:main"
atelier-curses-demos = "atelier.curses_demos:main"

[tool.hatch.build.targets.wheel]
packages = ["atelier"]

[tool.pytest.ini_options]
addopts = "-ra"
