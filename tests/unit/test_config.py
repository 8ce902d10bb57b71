"""
Tests for configuration, constants and logging helpers in candidate_intake.utils.
"""

import pytest
from loguru import logger
from pydantic import ValidationError

from candidate_intake.errors import DuplicateEmailError, PersistenceError, PersistenceErrorKind
from candidate_intake.utils import config
from candidate_intake.utils.config import AppSettings, DatabaseSettings, IntakeSettings
from candidate_intake.utils.constants import (
    DUPLICATE_EMAIL_MESSAGE,
    MAX_RESUME_SIZE_BYTES,
    SUPPORTED_RESUME_FORMATS,
)
from candidate_intake.utils.logger import _redact, audit_log


class TestSettings:
    def test_environment_from_env(self):
        assert config.get_settings().environment == "testing"

    def test_reload_settings_reads_env(self, monkeypatch):
        # restored to the current settings on teardown
        monkeypatch.setattr(config, "_settings", config.get_settings())
        monkeypatch.setenv("INTAKE_MAX_RESUME_SIZE_BYTES", "1024")

        assert config.reload_settings().intake.max_resume_size_bytes == 1024

    def test_default_resume_limit(self):
        assert IntakeSettings().max_resume_size_bytes == MAX_RESUME_SIZE_BYTES

    def test_rejects_non_positive_resume_limit(self):
        with pytest.raises(ValidationError):
            IntakeSettings(max_resume_size_bytes=0)

    def test_connection_string(self):
        assert DatabaseSettings(host="db", port=27018).connection_string == "mongodb://db:27018"
        settings = DatabaseSettings(host="db", username="u", password="p")
        assert settings.connection_string == "mongodb://u:p@db:27017"

    def test_nested_defaults(self):
        settings = AppSettings()
        assert settings.database.port == 27017
        assert settings.logging.level == "INFO"


class TestConstants:
    def test_duplicate_email_message(self):
        assert DUPLICATE_EMAIL_MESSAGE == "The email already exists in the database"

    def test_resume_formats_are_extensions(self):
        assert all(fmt.startswith(".") for fmt in SUPPORTED_RESUME_FORMATS)


class TestErrors:
    def test_duplicate_email_message(self):
        error = DuplicateEmailError("john.doe@example.com")
        assert str(error) == DUPLICATE_EMAIL_MESSAGE
        assert error.email == "john.doe@example.com"

    def test_persistence_error_defaults(self):
        error = PersistenceError("Database error")
        assert str(error) == "Database error"
        assert error.kind == PersistenceErrorKind.OTHER
        assert not error.is_conflict
        assert error.fields == []


class TestAuditRedaction:
    def test_redacts_cv_content_and_contact_fields(self):
        data = {"email": "a@example.com", "phone": "+34 612 345 678", "cv": {"file_content": "..."}}
        result = _redact(data)
        assert result["email"] == "a@example.com"
        assert result["phone"] == "***REDACTED***"
        assert result["cv"]["file_content"] == "***REDACTED***"

    def test_walks_lists(self):
        result = _redact([{"address": "Main St 1"}, "plain"])
        assert result == [{"address": "***REDACTED***"}, "plain"]

    def test_audit_entry_is_tagged_and_redacted(self):
        messages = []
        sink_id = logger.add(messages.append, format="{extra[audit_type]} | {message}")
        try:
            audit_log("candidate_rejected", {"email": "a@example.com", "phone": "555 0100"}, "REJECTION")
        finally:
            logger.remove(sink_id)

        assert len(messages) == 1
        assert messages[0].startswith("REJECTION | candidate_rejected")
        assert "555 0100" not in messages[0]
        assert "a@example.com" in messages[0]
