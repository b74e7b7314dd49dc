"""
CLI entrypoint for the owner-membership reconciliation job. Run once after
importing legacy data, or from cron:

  python -m app.reconcile
"""

import logging
import sys

from app.core.database import SessionLocal
from app.services.reconcile import repair_owner_memberships

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    """Give every community owner exactly one 'Community Admin' membership."""
    db = SessionLocal()
    try:
        inserted, promoted = repair_owner_memberships(db)
        logger.info(
            "Reconciliation completed: inserted=%s promoted=%s", inserted, promoted
        )
        return 0
    except Exception as e:
        logger.exception("Reconciliation job failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
