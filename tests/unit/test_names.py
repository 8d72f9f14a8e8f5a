"""Unit tests for object and queue name validation."""

from __future__ import annotations

import pytest

from jobqueue_options.core.errors import InvalidArgumentError
from jobqueue_options.core.names import (
    assert_object_name,
    assert_queue_name,
    is_valid_object_name,
    is_valid_queue_name,
)


class TestAssertObjectName:
    """Tests for assert_object_name()."""

    @pytest.mark.parametrize("name", ["valid_name", "_private", "Jobs2024", "a" * 50])
    def test_valid_names(self, name: str) -> None:
        """Word-character names not starting with a digit are accepted."""
        assert_object_name(name)

    def test_space_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match="alphanumeric"):
            assert_object_name("my schema")

    def test_leading_digit_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match="cannot start with a number"):
            assert_object_name("1abc")

    def test_too_long_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match="50 characters"):
            assert_object_name("a" * 51)

    @pytest.mark.parametrize("name", [None, 42, ["jobs"]])
    def test_non_string_rejected(self, name: object) -> None:
        with pytest.raises(InvalidArgumentError, match="must be a string"):
            assert_object_name(name)

    def test_empty_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match="empty"):
            assert_object_name("")

    @pytest.mark.parametrize("name", ["jobs-queue", "jobs.queue", "schéma", "drop;table"])
    def test_non_word_characters_rejected(self, name: str) -> None:
        """Hyphens, dots, punctuation and non-ASCII letters are rejected."""
        with pytest.raises(InvalidArgumentError):
            assert_object_name(name)

    def test_invalid_argument_is_value_error(self) -> None:
        """Callers catching ValueError also catch validation failures."""
        with pytest.raises(ValueError):
            assert_object_name("1abc")


class TestAssertQueueName:
    """Tests for assert_queue_name()."""

    @pytest.mark.parametrize("name", ["emails", "email-send", "email_send", "q1"])
    def test_valid_names(self, name: str) -> None:
        assert_queue_name(name)

    @pytest.mark.parametrize("name", [None, ""])
    def test_missing_name_rejected(self, name: object) -> None:
        with pytest.raises(InvalidArgumentError, match="required"):
            assert_queue_name(name)

    def test_non_string_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match="must be a string"):
            assert_queue_name(123)

    @pytest.mark.parametrize("name", ["...", "   ", "!@#$"])
    def test_no_word_characters_rejected(self, name: str) -> None:
        with pytest.raises(InvalidArgumentError, match="alphanumeric"):
            assert_queue_name(name)

    @pytest.mark.parametrize("name", ["jobs.email", "jobs/email", "a b"])
    def test_mixed_characters_accepted(self, name: str) -> None:
        """One word character anywhere is enough; the check is a search."""
        assert_queue_name(name)


class TestPredicates:
    """Tests for the boolean predicates."""

    def test_is_valid_object_name(self) -> None:
        assert is_valid_object_name("valid_name") is True
        assert is_valid_object_name("my schema") is False

    def test_is_valid_queue_name(self) -> None:
        assert is_valid_queue_name("emails") is True
        assert is_valid_queue_name("") is False
