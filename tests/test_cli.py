import io
import json
import os
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest.mock import patch

from notionarchive import cli
from notionarchive.invoker import InvocationResponse


class TestCli(unittest.TestCase):
    def _run(self, argv: list[str], response: InvocationResponse, env: dict[str, str] | None = None):
        out = io.StringIO()
        with patch.dict(os.environ, env or {}, clear=True), \
                patch("notionarchive.cli.load_dotenv"), \
                patch("notionarchive.cli.configure_logging"), \
                patch("notionarchive.cli.invoke", return_value=response) as invoke_mock, \
                redirect_stdout(out):
            code = cli.main(argv)
        return code, invoke_mock, out.getvalue()

    def test_defaults_to_dry_run_with_trash(self) -> None:
        code, invoke_mock, out = self._run(
            [],
            InvocationResponse(status_code=200, body={"message": "ok"}),
            env={"NOTION_TOKEN": "env_token"},
        )

        self.assertEqual(code, 0)
        request = invoke_mock.call_args.args[0]
        self.assertTrue(request["dryRun"])
        self.assertTrue(request["archiveInstead"])
        self.assertIsNone(request["databases"])
        self.assertNotIn("notionToken", request)
        self.assertEqual(invoke_mock.call_args.kwargs["default_token"], "env_token")
        self.assertEqual(json.loads(out), {"message": "ok"})

    def test_flags_build_the_request(self) -> None:
        code, invoke_mock, _ = self._run(
            [
                "--database", "QBO_PROJECTS",
                "-d", "SKU_INFORMATION",
                "--filter", '{"property": "Status", "select": {"equals": "Done"}}',
                "--execute",
                "--no-trash",
                "--token", "cli_token",
            ],
            InvocationResponse(status_code=200, body={}),
        )

        self.assertEqual(code, 0)
        request = invoke_mock.call_args.args[0]
        self.assertEqual(request["databases"], ["QBO_PROJECTS", "SKU_INFORMATION"])
        self.assertEqual(request["filter"]["property"], "Status")
        self.assertFalse(request["dryRun"])
        self.assertFalse(request["archiveInstead"])
        self.assertEqual(request["notionToken"], "cli_token")

    def test_filter_from_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "filter.json"
            path.write_text('{"property": "Done", "checkbox": {"equals": true}}', encoding="utf-8")

            code, invoke_mock, _ = self._run(
                ["--filter", f"@{path}"],
                InvocationResponse(status_code=200, body={}),
            )

        self.assertEqual(code, 0)
        self.assertEqual(invoke_mock.call_args.args[0]["filter"]["property"], "Done")

    def test_bad_filter_is_usage_error(self) -> None:
        code, invoke_mock, _ = self._run(
            ["--filter", "[1, 2]"],
            InvocationResponse(status_code=200, body={}),
        )

        self.assertEqual(code, 2)
        invoke_mock.assert_not_called()

    def test_bad_settings_are_usage_error(self) -> None:
        code, invoke_mock, _ = self._run(
            [],
            InvocationResponse(status_code=200, body={}),
            env={"NOTION_ARCHIVE_PAGE_SIZE": "lots"},
        )

        self.assertEqual(code, 2)
        invoke_mock.assert_not_called()

    def test_non_finite_pacing_is_usage_error(self) -> None:
        code, invoke_mock, _ = self._run(
            ["--execute"],
            InvocationResponse(status_code=200, body={}),
            env={"NOTION_ARCHIVE_PACING_SECONDS": "nan"},
        )

        self.assertEqual(code, 2)
        invoke_mock.assert_not_called()

    def test_exit_codes_follow_status(self) -> None:
        code, _, _ = self._run([], InvocationResponse(status_code=400, body={"error": "x"}))
        self.assertEqual(code, 2)

        code, _, _ = self._run([], InvocationResponse(status_code=500, body={"error": "x"}))
        self.assertEqual(code, 1)


if __name__ == "__main__":
    unittest.main()
