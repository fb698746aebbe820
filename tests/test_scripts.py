"""Tests for the operator entrypoints: create_user and init_db."""

import io
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest.mock import MagicMock, patch

from hotel_rooms.core.database import create_db_engine
from hotel_rooms.core.schema import CURRENT_SCHEMA_VERSION, SchemaInitializationError, current_version
from hotel_rooms.scripts import create_user
from hotel_rooms.services.repository import UsernameTakenError


class TestCreateUserScript(unittest.TestCase):
    """Exit codes and messages of python -m hotel_rooms.scripts.create_user."""

    def _run(self, argv: list[str]) -> tuple[int, str, str]:
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = create_user.main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_creates_user(self) -> None:
        service = MagicMock()
        with patch.object(create_user, "build_hotel_service", return_value=service):
            code, out, _ = self._run(["ivan", "secret", "Иван"])
        self.assertEqual(code, 0)
        self.assertIn("Created user 'ivan'", out)
        service.register.assert_called_once_with("ivan", "secret", "Иван")

    def test_duplicate_username_exits_1(self) -> None:
        service = MagicMock()
        service.register.side_effect = UsernameTakenError("1")
        with patch.object(create_user, "build_hotel_service", return_value=service):
            code, _, err = self._run(["1", "1", "Иван Иванов"])
        self.assertEqual(code, 1)
        self.assertIn("already taken", err)

    def test_blank_username_exits_1_without_opening_database(self) -> None:
        with patch.object(create_user, "build_hotel_service") as build:
            code, _, err = self._run(["   ", "pw", "Name"])
        self.assertEqual(code, 1)
        self.assertIn("must not be empty", err)
        build.assert_not_called()

    def test_schema_failure_exits_1(self) -> None:
        with patch.object(
            create_user,
            "build_hotel_service",
            side_effect=SchemaInitializationError("Cannot open database."),
        ):
            code, _, err = self._run(["ivan", "pw", "Name"])
        self.assertEqual(code, 1)
        self.assertIn("Cannot open database.", err)


class TestInitDb(unittest.TestCase):
    """python -m hotel_rooms.init_db against a temporary database file."""

    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.engine = create_db_engine(f"sqlite:///{Path(self._tmp.name) / 'rooms.db'}")

    def tearDown(self) -> None:
        self.engine.dispose()
        self._tmp.cleanup()

    def test_initializes_and_is_repeatable(self) -> None:
        from hotel_rooms import init_db

        with patch.object(init_db, "engine", self.engine):
            self.assertEqual(init_db.main(), 0)
            self.assertEqual(init_db.main(), 0)
        self.assertEqual(current_version(self.engine), CURRENT_SCHEMA_VERSION)

    def test_unopenable_database_exits_1(self) -> None:
        from hotel_rooms import init_db

        broken = create_db_engine(f"sqlite:///{Path(self._tmp.name) / 'missing' / 'rooms.db'}")
        self.addCleanup(broken.dispose)
        with patch.object(init_db, "engine", broken):
            self.assertEqual(init_db.main(), 1)


if __name__ == "__main__":
    unittest.main()
