import unittest

from notionarchive.util.ids import is_notion_id, normalize_notion_id


class TestIds(unittest.TestCase):
    def test_is_notion_id(self) -> None:
        self.assertTrue(is_notion_id("6bf327c6c1454c71a797baca43635424"))
        self.assertTrue(is_notion_id("6bf327c6-c145-4c71-a797-baca43635424"))
        self.assertTrue(is_notion_id("6BF327C6C1454C71A797BACA43635424"))

        self.assertFalse(is_notion_id("6bf327c6"))
        self.assertFalse(is_notion_id("zzf327c6c1454c71a797baca43635424"))
        self.assertFalse(is_notion_id(None))
        self.assertFalse(is_notion_id(123))

    def test_normalize_notion_id(self) -> None:
        expected = "6bf327c6-c145-4c71-a797-baca43635424"
        self.assertEqual(normalize_notion_id("6bf327c6c1454c71a797baca43635424"), expected)
        self.assertEqual(normalize_notion_id(expected), expected)
        self.assertEqual(normalize_notion_id(" 6BF327C6C1454C71A797BACA43635424 "), expected)

    def test_normalize_rejects_invalid(self) -> None:
        with self.assertRaises(ValueError):
            normalize_notion_id("not-an-id")


if __name__ == "__main__":
    unittest.main()
