# SPDX-License-Identifier: MIT

from laneline.cleanup import register_cleanup
from laneline.initialize import initialize
from laneline.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
