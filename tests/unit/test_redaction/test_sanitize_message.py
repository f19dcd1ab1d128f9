"""Unit tests for log message sanitization."""

import pytest

from src.features.redaction.sanitize import (
    SanitizedLogData,
    sanitize_log_data,
    sanitize_message,
)


class TestSanitizeMessage:
    """Tests for sanitize_message."""

    def test_password_assignment(self) -> None:
        """Password assignments are redacted."""
        result = sanitize_message("Login failed with password=secret123")

        assert result == "Login failed with password=[REDACTED]"

    def test_password_colon_form(self) -> None:
        """password: value is normalized to password=[REDACTED]."""
        result = sanitize_message("Reset with password: hunter2")

        assert result == "Reset with password=[REDACTED]"

    def test_passphrase_fully_redacted(self) -> None:
        """Every word of an unquoted passphrase is redacted."""
        result = sanitize_message("reset failed password: correct horse battery")

        assert result == "reset failed password=[REDACTED]"

    def test_quoted_password_ends_at_quote(self) -> None:
        """A quoted password is redacted up to its closing quote."""
        result = sanitize_message("set password='two words' for bob")

        assert result == "set password=[REDACTED] for bob"

    def test_json_style_password(self) -> None:
        """Quoted keys in serialized payloads are matched."""
        result = sanitize_message('body {"password": "s3cret"}')

        assert "s3cret" not in result
        assert result == 'body {"password=[REDACTED]}'

    def test_password_case_insensitive(self) -> None:
        """The keyword matches in any case."""
        result = sanitize_message("PASSWORD=abc")

        assert result == "password=[REDACTED]"

    def test_token_assignment(self) -> None:
        """Token assignments are redacted."""
        result = sanitize_message("Callback token=abc123-def ok")

        assert result == "Callback token=[REDACTED] ok"

    def test_token_colon_form(self) -> None:
        """token: value is normalized."""
        result = sanitize_message("Issued token: xyz789")

        assert result == "Issued token=[REDACTED]"

    def test_quoted_token(self) -> None:
        """Quotes around the value are consumed."""
        result = sanitize_message('payload token="abc"')

        assert result == "payload token=[REDACTED]"

    def test_bearer_token(self) -> None:
        """Bearer tokens are redacted."""
        result = sanitize_message(
            "Authorization header Bearer eyJhbGciOiJIUzI1NiJ9.eyJzdWIiOiIxIn0.sig"
        )

        assert result == "Authorization header Bearer [REDACTED]"

    @pytest.mark.parametrize("word", ["bearer", "BEARER", "Bearer", "bEaReR"])
    def test_bearer_casing_preserved(self, word: str) -> None:
        """The original casing of the word Bearer is kept."""
        result = sanitize_message(f"got {word} opaque-token-value")

        assert result == f"got {word} [REDACTED]"

    def test_multiple_secrets(self) -> None:
        """All patterns apply to the same message."""
        result = sanitize_message(
            "Bearer abc.def.ghi failed; token=t1 password=p1 retry now"
        )

        assert result == (
            "Bearer [REDACTED] failed; token=[REDACTED] password=[REDACTED]"
        )

    def test_message_without_secrets_unchanged(self) -> None:
        """Ordinary messages pass through."""
        message = "Document 42 approved by reviewer"

        assert sanitize_message(message) == message

    def test_words_without_assignment_unchanged(self) -> None:
        """Mentioning the keywords without a value is not redacted."""
        message = "User changed their password and refreshed tokens"

        assert sanitize_message(message) == message

    @pytest.mark.parametrize(
        "message",
        [
            "Login failed with password=secret123",
            "Bearer abc.def.ghi",
            "token: xyz and password: pw",
            "reset failed password: correct horse battery",
            "set password='two words' for bob",
        ],
    )
    def test_idempotent(self, message: str) -> None:
        """Sanitizing twice equals sanitizing once."""
        once = sanitize_message(message)

        assert sanitize_message(once) == once


class TestSanitizeLogData:
    """Tests for sanitize_log_data."""

    def test_returns_pair(self) -> None:
        """Message and metadata are sanitized independently."""
        result = sanitize_log_data(
            "Login with password=pw", {"user": "alice", "password": "pw"}
        )

        assert isinstance(result, SanitizedLogData)
        assert result.message == "Login with password=[REDACTED]"
        assert result.metadata == {"user": "alice", "password": "[REDACTED]"}

    def test_no_metadata(self) -> None:
        """Missing metadata stays None."""
        result = sanitize_log_data("hello")

        assert result.metadata is None

    def test_metadata_strings_not_message_scanned(self) -> None:
        """Metadata values are only redacted by key, not by content."""
        result = sanitize_log_data("msg", {"note": "password=visible"})

        assert result.metadata == {"note": "password=visible"}
