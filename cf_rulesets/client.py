"""
Rulesets API client.
"""

import logging
from enum import Enum
from typing import Any, List, Optional

from pydantic import ValidationError

from .errors import DecodeError, UnexpectedBodyError
from .models import (
    ListRulesetResponse,
    Ruleset,
    RulesetResponse,
    RulesetRule,
    UpdateRulesetRequest,
)
from .transport import RequestExecutor

logger = logging.getLogger("cf_rulesets")


class RouteRoot(str, Enum):
    """Path root selecting the owner of a ruleset."""
    ZONE = "zones"
    ACCOUNT = "accounts"


class RulesetsClient:
    """
    Client for the zone and account rulesets endpoints.

    Every call is a single request through the injected executor. The client
    keeps no state between calls and adds no retry, timeout or pagination
    policy of its own; ``context`` is handed to the executor as given.
    """

    def __init__(self, executor: RequestExecutor):
        """Initialize the client with the executor that performs requests."""
        self.executor = executor

    # List

    def list_zone_rulesets(self, zone_id: str, context: Any = None) -> List[Ruleset]:
        """Fetch all rulesets for a zone."""
        return self._list_rulesets(context, RouteRoot.ZONE, zone_id)

    def list_account_rulesets(self, account_id: str, context: Any = None) -> List[Ruleset]:
        """Fetch all rulesets for an account."""
        return self._list_rulesets(context, RouteRoot.ACCOUNT, account_id)

    def _list_rulesets(self, context: Any, route_root: RouteRoot, identifier: str) -> List[Ruleset]:
        path = f"/{route_root.value}/{identifier}/rulesets"
        res = self._execute(context, "GET", path)
        return self._decode(ListRulesetResponse, res).result

    # Get

    def get_zone_ruleset(self, zone_id: str, ruleset_id: str, context: Any = None) -> Ruleset:
        """Fetch a single ruleset of a zone."""
        return self._get_ruleset(context, RouteRoot.ZONE, zone_id, ruleset_id)

    def get_account_ruleset(self, account_id: str, ruleset_id: str, context: Any = None) -> Ruleset:
        """Fetch a single ruleset of an account."""
        return self._get_ruleset(context, RouteRoot.ACCOUNT, account_id, ruleset_id)

    def _get_ruleset(self, context: Any, route_root: RouteRoot, identifier: str, ruleset_id: str) -> Ruleset:
        path = f"/{route_root.value}/{identifier}/rulesets/{ruleset_id}"
        res = self._execute(context, "GET", path)
        return self._decode(RulesetResponse, res).result

    # Create

    def create_zone_ruleset(self, zone_id: str, ruleset: Ruleset, context: Any = None) -> Ruleset:
        """Create a ruleset for a zone and return it as stored by the service."""
        return self._create_ruleset(context, RouteRoot.ZONE, zone_id, ruleset)

    def create_account_ruleset(self, account_id: str, ruleset: Ruleset, context: Any = None) -> Ruleset:
        """Create a ruleset for an account and return it as stored by the service."""
        return self._create_ruleset(context, RouteRoot.ACCOUNT, account_id, ruleset)

    def _create_ruleset(self, context: Any, route_root: RouteRoot, identifier: str, ruleset: Ruleset) -> Ruleset:
        path = f"/{route_root.value}/{identifier}/rulesets"
        res = self._execute(context, "POST", path, ruleset.to_payload())
        return self._decode(RulesetResponse, res).result

    # Update

    def update_zone_ruleset(
        self,
        zone_id: str,
        ruleset_id: str,
        description: str,
        rules: List[RulesetRule],
        context: Any = None,
    ) -> Ruleset:
        """Replace the description and rules of a zone ruleset."""
        return self._update_ruleset(context, RouteRoot.ZONE, zone_id, ruleset_id, description, rules)

    def update_account_ruleset(
        self,
        account_id: str,
        ruleset_id: str,
        description: str,
        rules: List[RulesetRule],
        context: Any = None,
    ) -> Ruleset:
        """Replace the description and rules of an account ruleset."""
        return self._update_ruleset(context, RouteRoot.ACCOUNT, account_id, ruleset_id, description, rules)

    def _update_ruleset(
        self,
        context: Any,
        route_root: RouteRoot,
        identifier: str,
        ruleset_id: str,
        description: str,
        rules: List[RulesetRule],
    ) -> Ruleset:
        path = f"/{route_root.value}/{identifier}/rulesets/{ruleset_id}"
        payload = UpdateRulesetRequest(description=description, rules=rules)
        res = self._execute(context, "PUT", path, payload.to_payload())
        return self._decode(RulesetResponse, res).result

    # Delete

    def delete_zone_ruleset(self, zone_id: str, ruleset_id: str, context: Any = None) -> None:
        """Delete a ruleset of a zone."""
        self._delete_ruleset(context, RouteRoot.ZONE, zone_id, ruleset_id)

    def delete_account_ruleset(self, account_id: str, ruleset_id: str, context: Any = None) -> None:
        """Delete a ruleset of an account."""
        self._delete_ruleset(context, RouteRoot.ACCOUNT, account_id, ruleset_id)

    def _delete_ruleset(self, context: Any, route_root: RouteRoot, identifier: str, ruleset_id: str) -> None:
        path = f"/{route_root.value}/{identifier}/rulesets/{ruleset_id}"
        res = self._execute(context, "DELETE", path)

        # Success is a 204 with no body, so any content is an error payload
        # that came back through the success path.
        if res:
            raise UnexpectedBodyError(res.decode("utf-8", errors="replace"))

    def _execute(self, context: Any, method: str, path: str, body: Optional[Any] = None) -> bytes:
        logger.debug(f"Rulesets request: {method} {path}")
        return self.executor.execute(context, method, path, body)

    @staticmethod
    def _decode(response_type, res: bytes):
        try:
            return response_type.model_validate_json(res)
        except ValidationError as e:
            raise DecodeError() from e
