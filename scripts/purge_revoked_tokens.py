"""
Delete expired entries from the revoked token ledger once and exit.
Suitable for cron: python scripts/purge_revoked_tokens.py
"""

import logging
import sys
from pathlib import Path

# Add repository root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from todo_api.core.database import SessionLocal
from todo_api.services.revocation_ledger import revocation_ledger


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    db = SessionLocal()
    try:
        removed = revocation_ledger.purge_expired(db)
    finally:
        db.close()
    print(f"Purged {removed} expired revoked tokens.")


if __name__ == "__main__":
    main()
