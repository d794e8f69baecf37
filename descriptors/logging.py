from __future__ import annotations

import sys


class Logger:
    """Console logger.

    Progress goes to stdout next to the descriptor table; warnings go to
    stderr so the table can be piped on its own.
    """

    def __init__(self, verbose: bool) -> None:
        self.verbose = verbose

    def info(self, message: str) -> None:
        print(f"[*] {message}")

    def success(self, message: str) -> None:
        print(f"[+] {message}")

    def warn(self, message: str) -> None:
        print(f"[!] {message}", file=sys.stderr)

    def debug(self, message: str) -> None:
        if self.verbose:
            print(f"[DBG] {message}", file=sys.stderr)
