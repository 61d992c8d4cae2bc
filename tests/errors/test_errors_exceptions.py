import unittest

from notionarchive.errors.exceptions import (
    ApiError,
    ApiErrorInfo,
    AuthError,
    ConfigurationError,
    ConflictError,
    InvalidArgumentError,
    MissingConfigurationError,
    NotFoundError,
    NotionArchiveError,
    PermissionError,
    RateLimitError,
    UnknownDatabaseError,
    map_api_error,
    parse_retry_after,
)


class TestExceptions(unittest.TestCase):
    def test_base_error_keeps_details_and_cause(self) -> None:
        cause = RuntimeError("root")
        err = NotionArchiveError("msg", details={"k": "v"}, cause=cause)
        self.assertEqual(str(err), "msg")
        self.assertEqual(err.details["k"], "v")
        self.assertIs(err.cause, cause)

    def test_configuration_errors_share_a_base(self) -> None:
        self.assertTrue(issubclass(MissingConfigurationError, ConfigurationError))
        self.assertTrue(issubclass(UnknownDatabaseError, ConfigurationError))
        self.assertFalse(issubclass(RateLimitError, ConfigurationError))

    def test_map_api_error_by_status(self) -> None:
        self.assertIsInstance(map_api_error(ApiErrorInfo(status_code=400)), InvalidArgumentError)
        self.assertIsInstance(map_api_error(ApiErrorInfo(status_code=401)), AuthError)
        self.assertIsInstance(map_api_error(ApiErrorInfo(status_code=403)), PermissionError)
        self.assertIsInstance(map_api_error(ApiErrorInfo(status_code=404)), NotFoundError)
        self.assertIsInstance(map_api_error(ApiErrorInfo(status_code=409)), ConflictError)
        self.assertIsInstance(map_api_error(ApiErrorInfo(status_code=429)), RateLimitError)
        self.assertIsInstance(map_api_error(ApiErrorInfo(status_code=502)), ApiError)
        self.assertIsInstance(map_api_error(ApiErrorInfo(status_code=418)), ApiError)

    def test_map_api_error_code_wins_over_status(self) -> None:
        err = map_api_error(ApiErrorInfo(status_code=400, code="rate_limited"))
        self.assertIsInstance(err, RateLimitError)

        err = map_api_error(ApiErrorInfo(status_code=0, code="object_not_found"))
        self.assertIsInstance(err, NotFoundError)

    def test_map_api_error_unknown_code_falls_back_to_status(self) -> None:
        err = map_api_error(ApiErrorInfo(status_code=404, code="notionhq_client_response_error"))
        self.assertIsInstance(err, NotFoundError)

    def test_map_api_error_details_and_message(self) -> None:
        err = map_api_error(
            ApiErrorInfo(status_code=429, code="rate_limited", message="slow down", retry_after=2.0)
        )
        self.assertEqual(str(err), "slow down")
        self.assertEqual(err.details["status_code"], 429)
        self.assertEqual(err.details["code"], "rate_limited")
        self.assertEqual(err.retry_after, 2.0)

        err = map_api_error(ApiErrorInfo(status_code=500))
        self.assertEqual(str(err), "HTTP error 500")
        self.assertNotIn("retry_after", err.details)

    def test_rate_limit_error_without_hint(self) -> None:
        self.assertIsNone(RateLimitError("x").retry_after)

    def test_parse_retry_after(self) -> None:
        self.assertEqual(parse_retry_after("3"), 3.0)
        self.assertEqual(parse_retry_after(" 1.5 "), 1.5)
        self.assertEqual(parse_retry_after(0), 0.0)
        self.assertIsNone(parse_retry_after(None))
        self.assertIsNone(parse_retry_after("soon"))
        self.assertIsNone(parse_retry_after("-1"))
        self.assertIsNone(parse_retry_after("inf"))
        self.assertIsNone(parse_retry_after("Wed, 21 Oct 2015 07:28:00 GMT"))


if __name__ == "__main__":
    unittest.main()
