"""
Seed the role catalog. Run from project root:
  python -m app.scripts.seed_roles [--dry-run]
Creates 'Community Admin' and 'Community Member' when missing.
"""
import argparse
import sys

from app.core.database import SessionLocal
from app.models.role import ALLOWED_ROLE_NAMES
from app.services.roles import get_or_create_role, get_role_by_name


def main() -> int:
    parser = argparse.ArgumentParser(description="Create the Conclave catalog roles if missing.")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Only report which roles are missing",
    )
    args = parser.parse_args()

    db = SessionLocal()
    try:
        missing = [name for name in ALLOWED_ROLE_NAMES if get_role_by_name(db, name) is None]
        if not missing:
            print("All catalog roles already exist.")
            return 0
        if args.dry_run:
            print(f"Missing roles: {', '.join(missing)}")
            return 0
        for name in missing:
            role = get_or_create_role(db, name)
            print(f"Created role '{role.name}' (id={role.id}).")
        db.commit()
        return 0
    except Exception as e:
        db.rollback()
        print(f"Seeding roles failed: {e}", file=sys.stderr)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
