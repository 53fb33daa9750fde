"""
Tests for structured membership logging.
"""

import json
import logging
import pytest
from io import StringIO
from unittest.mock import patch

from mlist.members.logging import MemberLogger, SensitiveDataFilter, configure_member_logging


@pytest.fixture
def captured():
    """Attach a string handler to a fresh component logger."""
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    logger = MemberLogger("test_component")
    logger.logger.addHandler(handler)
    logger.logger.setLevel(logging.DEBUG)
    yield logger, stream
    logger.logger.removeHandler(handler)


class TestMemberLogger:
    """Test structured record output and context tracking."""

    def test_logger_name(self):
        logger = MemberLogger("membership")

        assert logger.logger.name == "mlist.membership"
        assert logger.component == "membership"

    def test_records_are_json(self, captured):
        logger, stream = captured
        logger.add_context("list_id", "a1b2c3d4e5")

        logger.info("Member added", {"status": "subscribed"})

        record = json.loads(stream.getvalue().strip())
        assert record["component"] == "test_component"
        assert record["message"] == "Member added"
        assert record["context"] == {"list_id": "a1b2c3d4e5"}
        assert record["extra"] == {"status": "subscribed"}
        assert "timestamp" in record

    def test_log_levels(self):
        logger = MemberLogger("levels")

        for level in ('info', 'warning', 'error'):
            with patch.object(logger.logger, level) as mock_method:
                getattr(logger, level)("message", {"a": 1})
                mock_method.assert_called_once()

    def test_scoped_context_is_restored(self):
        logger = MemberLogger("scoped")
        logger.add_context("list_id", "abc")

        with logger.scoped_context({"member_key": "123"}):
            assert logger.context == {"list_id": "abc", "member_key": "123"}

        assert logger.context == {"list_id": "abc"}

    def test_time_operation_success(self, captured):
        logger, stream = captured

        with logger.time_operation("add_member"):
            pass

        assert "Operation add_member completed" in stream.getvalue()
        assert logger.get_operation_stats()["add_member"] == {'total': 1, 'success': 1, 'failure': 0}

    def test_time_operation_failure_reraises(self, captured):
        logger, stream = captured

        with pytest.raises(RuntimeError):
            with logger.time_operation("hard_delete"):
                raise RuntimeError("boom")

        assert "Operation hard_delete failed" in stream.getvalue()
        assert "boom" in stream.getvalue()
        assert logger.get_operation_stats()["hard_delete"]["failure"] == 1


class TestSensitiveDataFilter:
    """Test credential masking."""

    def test_masks_api_key_in_message(self):
        data_filter = SensitiveDataFilter()

        filtered = data_filter.filter_message("connecting with api_key=abcdef-us6")

        assert "abcdef" not in filtered
        assert "api_key=***" in filtered

    def test_masks_bare_mailchimp_key(self):
        data_filter = SensitiveDataFilter()
        key = '0123456789abcdef0123456789abcdef-us6'

        assert key not in data_filter.filter_message(f"bad key {key}")

    def test_member_key_is_not_masked(self):
        data_filter = SensitiveDataFilter()
        member_key = '0123456789abcdef0123456789abcdef'

        assert data_filter.filter_dict({"member_key": member_key}) == {"member_key": member_key}

    def test_filter_dict_nested(self):
        data_filter = SensitiveDataFilter()

        filtered = data_filter.filter_dict({"api_key": "secret-us6", "auth": {"password": "pw"}, "count": 3})

        assert filtered == {"api_key": "***", "auth": {"password": "***"}, "count": 3}


class TestConfigureLogging:
    """Test handler installation."""

    @pytest.fixture(autouse=True)
    def reset_handlers(self):
        yield
        root = logging.getLogger("mlist")
        for handler in list(root.handlers):
            handler.close()
        root.handlers.clear()
        root.setLevel(logging.NOTSET)

    def test_console_handler(self):
        logger = configure_member_logging(level="DEBUG")

        assert logger.name == "mlist"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_reconfigure_replaces_handlers(self):
        configure_member_logging()
        logger = configure_member_logging(format="standard")

        assert len(logger.handlers) == 1

    def test_file_output(self, tmp_path):
        log_file = tmp_path / "mlist.log"

        logger = configure_member_logging(output="file", filename=str(log_file))
        MemberLogger("file_test").warning("written to file")
        for handler in logger.handlers:
            handler.flush()

        assert "written to file" in log_file.read_text()
