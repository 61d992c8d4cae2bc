import unittest

from notionarchive.databases import NOTION_DATABASES, resolve_databases
from notionarchive.errors import ConfigurationError, UnknownDatabaseError
from notionarchive.models import DatabaseRef


class TestResolveDatabases(unittest.TestCase):
    def test_none_returns_whole_table_in_order(self) -> None:
        refs = resolve_databases(None)
        self.assertEqual([r.name for r in refs], list(NOTION_DATABASES))
        self.assertEqual([r.id for r in refs], list(NOTION_DATABASES.values()))

    def test_empty_returns_whole_table(self) -> None:
        self.assertEqual(len(resolve_databases([])), len(NOTION_DATABASES))

    def test_requested_names_keep_caller_order(self) -> None:
        refs = resolve_databases(["SKU_INFORMATION", "QBO_PROJECTS"])
        self.assertEqual(
            refs,
            [
                DatabaseRef(name="SKU_INFORMATION", id=NOTION_DATABASES["SKU_INFORMATION"]),
                DatabaseRef(name="QBO_PROJECTS", id=NOTION_DATABASES["QBO_PROJECTS"]),
            ],
        )

    def test_repeated_names_resolve_once(self) -> None:
        refs = resolve_databases(["SKU_INFORMATION", "QBO_PROJECTS", "SKU_INFORMATION"])
        self.assertEqual([r.name for r in refs], ["SKU_INFORMATION", "QBO_PROJECTS"])

    def test_unknown_name_fails_fast(self) -> None:
        with self.assertRaises(UnknownDatabaseError) as ctx:
            resolve_databases(["QBO_PROJECTS", "X", "Y"])

        self.assertIsInstance(ctx.exception, ConfigurationError)
        self.assertEqual(ctx.exception.details["unknown"], ["X", "Y"])

    def test_custom_table(self) -> None:
        table = {"A": "a-id", "B": "b-id"}
        self.assertEqual([r.id for r in resolve_databases(None, table=table)], ["a-id", "b-id"])
        with self.assertRaises(UnknownDatabaseError):
            resolve_databases(["QBO_PROJECTS"], table=table)


if __name__ == "__main__":
    unittest.main()
