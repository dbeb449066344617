"""Run the revocation ledger purge worker as a standalone process."""

import logging
import time

from todo_api.services.purge_worker import purge_worker


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    purge_worker.start()
    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        purge_worker.stop()


if __name__ == "__main__":
    main()
