"""Unit tests for the rating upsert statement built per database dialect."""

import unittest

from sqlalchemy.dialects import postgresql, sqlite

from storerate.services.rating_service import _upsert_statement


class TestUpsertStatement(unittest.TestCase):
    def test_postgresql_reports_insert_through_returning(self) -> None:
        sql = str(_upsert_statement("postgresql", 1, 2, 5).compile(dialect=postgresql.dialect()))
        self.assertIn("ON CONFLICT (user_id, store_id) DO UPDATE", sql)
        self.assertIn("RETURNING (xmax = 0)", sql)

    def test_sqlite_upsert_has_no_returning(self) -> None:
        sql = str(_upsert_statement("sqlite", 1, 2, 5).compile(dialect=sqlite.dialect()))
        self.assertIn("ON CONFLICT (user_id, store_id) DO UPDATE", sql)
        self.assertNotIn("RETURNING", sql)

    def test_unsupported_dialect(self) -> None:
        with self.assertRaises(RuntimeError):
            _upsert_statement("mysql", 1, 2, 5)


if __name__ == "__main__":
    unittest.main()
