"""Alembic migrations applied to a SQLite database."""

import unittest
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from app.services.communities import create_community
from app.services.identity import signup

ROOT = Path(__file__).resolve().parents[1]


class TestMigrations(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        # No ini file, so alembic leaves logging configuration alone.
        self.config = Config()
        self.config.set_main_option("script_location", str(ROOT / "alembic"))

    def tearDown(self) -> None:
        self.engine.dispose()

    def _run(self, fn, revision: str) -> None:
        with self.engine.begin() as connection:
            self.config.attributes["connection"] = connection
            fn(self.config, revision)

    def test_upgrade_head_fills_timestamps(self) -> None:
        self._run(command.upgrade, "head")
        self.assertTrue(
            {"users", "roles", "communities", "members"}
            <= set(inspect(self.engine).get_table_names())
        )
        with Session(self.engine) as session:
            user = signup(session, "Brock", "brock@pewter.gym", "onix1234")
            self.assertIsNotNone(user.created_at)
            community = create_community(session, "Pewter Gym", user.id)
            self.assertIsNotNone(community.created_at)
            self.assertIsNotNone(community.updated_at)

    def test_downgrade_base_drops_tables(self) -> None:
        self._run(command.upgrade, "head")
        self._run(command.downgrade, "base")
        self.assertEqual(
            set(inspect(self.engine).get_table_names()) - {"alembic_version"}, set()
        )


if __name__ == "__main__":
    unittest.main()
