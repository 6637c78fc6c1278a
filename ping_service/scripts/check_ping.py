import logging
import sys

import httpx

from ping_service import config

logger = logging.getLogger(__name__)

BASE_URL = f"http://127.0.0.1:{config.web.port}"
TIMEOUT = 5.0


def check(base_url: str = BASE_URL, transport: httpx.BaseTransport | None = None) -> bool:
    try:
        with httpx.Client(base_url=base_url, timeout=TIMEOUT, transport=transport) as client:
            response = client.get("/ping")
    except httpx.HTTPError as exc:
        logger.error("Ping request to %s failed: %s", base_url, exc)
        return False

    if response.status_code != httpx.codes.OK or response.text != "pong":
        logger.error("Unexpected ping answer from %s: %s %r", base_url, response.status_code, response.text)
        return False
    return True


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    base_url = args[0] if args else BASE_URL
    return 0 if check(base_url) else 1


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    sys.exit(main())
