"""
Unit Tests for Base Service.

Tests the BaseService helpers shared by every resource service.
"""

from unittest.mock import MagicMock, patch

import pytest

from unifi_cli.core.exceptions import ValidationError
from unifi_cli.services.base import BaseService


class TestBaseServiceInit:
    """Tests for BaseService initialization."""

    def test_init_stores_client(self):
        """Should store the provided client."""
        mock_client = MagicMock()

        service = BaseService(mock_client)

        assert service._client is mock_client
        assert service.client is mock_client

    def test_init_creates_logger(self):
        """Should create a logger for the service."""
        service = BaseService(MagicMock())

        assert service._logger is not None


class TestWithDefaults:
    """Tests for _with_defaults method."""

    def test_fields_override_defaults(self):
        body = BaseService._with_defaults({"a": 1, "b": 2}, {"b": 3, "c": 4})

        assert body == {"a": 1, "b": 3, "c": 4}

    def test_defaults_not_modified(self):
        """Should deep-copy defaults so list values are not shared."""
        defaults = {"ids": []}

        body = BaseService._with_defaults(defaults, {})
        body["ids"].append("x")

        assert defaults == {"ids": []}


class TestFirstRecord:
    """Tests for _first_record method."""

    def test_returns_first_data_element(self):
        assert BaseService._first_record({"data": [{"_id": "1"}, {"_id": "2"}]}) == {"_id": "1"}

    def test_returns_body_without_data(self):
        assert BaseService._first_record({"_id": "1"}) == {"_id": "1"}

    def test_returns_body_with_empty_data(self):
        body = {"meta": {"rc": "ok"}, "data": []}

        assert BaseService._first_record(body) is body

    def test_returns_none_for_empty_response(self):
        assert BaseService._first_record(None) is None


class TestValidation:
    """Tests for field validation helpers."""

    @pytest.fixture
    def service(self):
        return BaseService(MagicMock())

    def test_empty_update_rejected(self, service):
        with pytest.raises(ValidationError, match="No fields to update"):
            service._validate_update({})

    def test_update_with_fields_accepted(self, service):
        service._validate_update({"enabled": False})


class TestLogOperation:
    """Tests for _log_operation method."""

    def test_logs_with_service_name(self, mock_logger):
        service = BaseService(MagicMock())

        with patch.object(service, "_logger", mock_logger):
            service._log_operation("Deleting firewall rule", rule_id="r1")

        mock_logger.info.assert_called_once_with(
            "Deleting firewall rule",
            service="BaseService",
            rule_id="r1",
        )
