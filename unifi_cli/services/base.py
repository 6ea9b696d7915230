"""
Base Service.

Base class for all resource services providing the common write patterns:
create merges caller fields over defaults, update sends only caller fields.

Usage:
    from unifi_cli.services.base import BaseService

    class PortForwardService(BaseService):
        async def create_rule(self, fields: dict[str, Any]) -> dict[str, Any]:
            body = self._with_defaults(PORT_FORWARD_DEFAULTS, fields)
            return self._first_record(
                await self.client.post(self.client.rest_path("portforward"), body)
            )
"""

import copy
from typing import Any

from unifi_cli.client import RouterClient
from unifi_cli.core.exceptions import ValidationError
from unifi_cli.core.logging import get_logger


class BaseService:
    """
    Base class for all services.

    Provides:
    - Router client handle
    - Logging context
    - Create-default merging and partial update checks

    No cross-resource invariants are enforced. Deleting a resource that
    another one references is left to the router.
    """

    def __init__(self, client: RouterClient) -> None:
        """
        Initialize the service with a router client.

        Args:
            client: Client used for every request this service makes
        """
        self._client = client
        self._logger = get_logger(self.__class__.__module__)

    @property
    def client(self) -> RouterClient:
        """Get the router client."""
        return self._client

    @staticmethod
    def _with_defaults(
        defaults: dict[str, Any],
        fields: dict[str, Any],
    ) -> dict[str, Any]:
        """
        Build a create body: caller fields override defaults.

        Args:
            defaults: Keys the router requires, with empty/zero values
            fields: Caller-provided fields

        Returns:
            New dict; neither argument is modified
        """
        body = copy.deepcopy(defaults)
        body.update(fields)
        return body

    @staticmethod
    def _first_record(body: Any) -> Any:
        """Return data[0] of a v1 envelope, or the body itself when there is none."""
        if isinstance(body, dict):
            data = body.get("data")
            if isinstance(data, list) and data:
                return data[0]
        return body

    def _validate_update(self, fields: dict[str, Any]) -> None:
        """
        Reject an update that would send an empty body.

        Raises:
            ValidationError: If no fields were provided
        """
        if not fields:
            raise ValidationError("No fields to update")

    def _log_operation(self, operation: str, **context: Any) -> None:
        """Log a service operation with context."""
        self._logger.info(operation, service=self.__class__.__name__, **context)
