import unittest

from notionarchive.auth import DEFAULT_NOTION_VERSION, AuthInfo


class TestAuthInfo(unittest.TestCase):
    def test_valid_token(self) -> None:
        info = AuthInfo(token="secret_abc")
        self.assertEqual(info.token, "secret_abc")
        self.assertEqual(info.notion_version, DEFAULT_NOTION_VERSION)

    def test_blank_token_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            AuthInfo(token="")
        with self.assertRaises(ValueError):
            AuthInfo(token="   ")

    def test_blank_version_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            AuthInfo(token="secret_abc", notion_version="")

    def test_repr_hides_token(self) -> None:
        self.assertNotIn("secret_abc", repr(AuthInfo(token="secret_abc")))


if __name__ == "__main__":
    unittest.main()
