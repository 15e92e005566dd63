"""Unit tests for Settings validation."""

import unittest

from pydantic import ValidationError

from app.core.config import Settings


def _settings(**overrides: object) -> Settings:
    """Build Settings from explicit values only (no .env file)."""
    values: dict[str, object] = {"DATABASE_URL": "sqlite://", "JWT_SECRET": "x" * 40}
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestDatabaseUrl(unittest.TestCase):
    def test_postgres_and_sqlite_are_accepted(self) -> None:
        for url in (
            "postgresql://u:p@db:5432/roster",
            "postgresql+psycopg2://u:p@db/roster",
            "sqlite:///roster.db",
        ):
            with self.subTest(url=url):
                self.assertEqual(_settings(DATABASE_URL=f"  {url} ").DATABASE_URL, url)

    def test_other_schemes_are_rejected(self) -> None:
        for url in ("mysql://u:p@db/roster", "", "   "):
            with self.subTest(url=url):
                with self.assertRaises(ValidationError):
                    _settings(DATABASE_URL=url)


class TestJwtSettings(unittest.TestCase):
    def test_blank_secret_is_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JWT_SECRET="   ")

    def test_expiry_bounds(self) -> None:
        self.assertEqual(_settings(JWT_EXPIRE_MINUTES=0).JWT_EXPIRE_MINUTES, 0)
        self.assertEqual(_settings(JWT_EXPIRE_MINUTES=10080).JWT_EXPIRE_MINUTES, 10080)
        for value in (-1, 10081):
            with self.subTest(value=value):
                with self.assertRaises(ValidationError):
                    _settings(JWT_EXPIRE_MINUTES=value)

    def test_algorithm_is_stripped(self) -> None:
        self.assertEqual(_settings(JWT_ALGORITHM=" HS384 ").JWT_ALGORITHM, "HS384")


class TestMiscSettings(unittest.TestCase):
    def test_log_level_is_normalized(self) -> None:
        self.assertEqual(_settings(LOG_LEVEL="debug").LOG_LEVEL, "DEBUG")
        with self.assertRaises(ValidationError):
            _settings(LOG_LEVEL="LOUD")

    def test_api_prefix(self) -> None:
        self.assertEqual(_settings(API_PREFIX="/api/").API_PREFIX, "/api")
        with self.assertRaises(ValidationError):
            _settings(API_PREFIX="api")

    def test_page_sizes(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(MAX_PAGE_SIZE=0)


if __name__ == "__main__":
    unittest.main()
