# SPDX-License-Identifier: MIT

from daybook.initialize import initialize
from daybook.terminal.app import run


def main() -> None:
    initialize()
    run()


if __name__ == "__main__":
    main()
