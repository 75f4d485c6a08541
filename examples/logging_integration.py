from __future__ import annotations

import logging

from prettylog import configure_logging

_LOG = logging.getLogger("myapp.worker")


def load_config(path: str) -> dict:
    raise FileNotFoundError(path)


def main() -> None:
    configure_logging(level=logging.DEBUG, method_count=1, print_time=True)

    _LOG.info("worker starting with %d threads", 4)
    _LOG.warning("queue depth %d exceeds soft limit", 1200)
    try:
        load_config("/etc/myapp.toml")
    except FileNotFoundError:
        _LOG.exception("could not load configuration")


if __name__ == "__main__":
    main()
