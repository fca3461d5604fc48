"""
Tests for the rulesets client.
"""

import json
from unittest.mock import Mock

import pytest
import requests
from pydantic import ValidationError

from cf_rulesets.client import RouteRoot, RulesetsClient
from cf_rulesets.errors import DecodeError, UnexpectedBodyError
from cf_rulesets.models import (
    Ruleset,
    RulesetKind,
    RulesetPhase,
    RulesetRule,
    RulesetRuleAction,
)


def envelope(result):
    """Wrap a result the way the API does."""
    return json.dumps({
        "success": True,
        "errors": [],
        "messages": [],
        "result": result,
    }).encode()


@pytest.fixture
def ruleset_payload():
    """Fixture for a ruleset as returned by the API."""
    return {
        "id": "2f2feab2026849078ba485f918791bdc",
        "name": "block-bad-bots",
        "description": "",
        "kind": "zone",
        "version": "1",
        "last_updated": "2021-03-17T15:42:37.917815Z",
        "phase": "http_request_firewall_custom",
        "rules": [
            {
                "id": "62449e2e0de149619edb35e59c10d801",
                "version": "1",
                "action": "block",
                "expression": "(http.user_agent contains \"bot\")",
                "description": "",
                "last_updated": "2021-03-17T15:42:37.917815Z",
                "ref": "62449e2e0de149619edb35e59c10d801",
                "enabled": True,
            }
        ],
    }


@pytest.fixture
def executor(ruleset_payload):
    """Fixture for a request executor returning a single ruleset."""
    executor = Mock()
    executor.execute.return_value = envelope(ruleset_payload)
    return executor


@pytest.fixture
def client(executor):
    """Fixture for a client on the mocked executor."""
    return RulesetsClient(executor)


def test_route_roots():
    """Test the owner scopes map to their path roots."""
    assert RouteRoot.ZONE.value == "zones"
    assert RouteRoot.ACCOUNT.value == "accounts"


@pytest.mark.parametrize("method_name, root", [
    ("list_zone_rulesets", "zones"),
    ("list_account_rulesets", "accounts"),
])
def test_list_path(executor, client, method_name, root):
    """Test list requests the collection path of the owner."""
    executor.execute.return_value = envelope([])

    getattr(client, method_name)("owner1")

    executor.execute.assert_called_once_with(None, "GET", f"/{root}/owner1/rulesets", None)


@pytest.mark.parametrize("method_name, root", [
    ("get_zone_ruleset", "zones"),
    ("get_account_ruleset", "accounts"),
])
def test_get_path(executor, client, method_name, root):
    """Test get requests the ruleset path of the owner."""
    getattr(client, method_name)("owner1", "rs1")

    executor.execute.assert_called_once_with(None, "GET", f"/{root}/owner1/rulesets/rs1", None)


@pytest.mark.parametrize("method_name, root", [
    ("create_zone_ruleset", "zones"),
    ("create_account_ruleset", "accounts"),
])
def test_create_path(executor, client, method_name, root):
    """Test create posts to the collection path of the owner."""
    getattr(client, method_name)("owner1", Ruleset(name="r"))

    args = executor.execute.call_args[0]
    assert args[1] == "POST"
    assert args[2] == f"/{root}/owner1/rulesets"


@pytest.mark.parametrize("method_name, root", [
    ("update_zone_ruleset", "zones"),
    ("update_account_ruleset", "accounts"),
])
def test_update_path(executor, client, method_name, root):
    """Test update puts to the ruleset path of the owner."""
    getattr(client, method_name)("owner1", "rs1", "desc", [])

    args = executor.execute.call_args[0]
    assert args[1] == "PUT"
    assert args[2] == f"/{root}/owner1/rulesets/rs1"


@pytest.mark.parametrize("method_name, root", [
    ("delete_zone_ruleset", "zones"),
    ("delete_account_ruleset", "accounts"),
])
def test_delete_path(executor, client, method_name, root):
    """Test delete targets the ruleset path of the owner."""
    executor.execute.return_value = b""

    getattr(client, method_name)("owner1", "rs1")

    executor.execute.assert_called_once_with(None, "DELETE", f"/{root}/owner1/rulesets/rs1", None)


def test_list_zone_rulesets(executor, client):
    """Test listing zone rulesets returns the result array in order."""
    executor.execute.return_value = envelope([
        {
            "id": "ruleset-1",
            "name": "custom firewall",
            "kind": "zone",
            "phase": "http_request_firewall_custom",
            "rules": [],
        },
        {
            "id": "ruleset-2",
            "name": "transforms",
            "kind": "zone",
            "phase": "http_request_transform",
            "rules": [],
        },
    ])

    rulesets = client.list_zone_rulesets("abc123")

    executor.execute.assert_called_once_with(None, "GET", "/zones/abc123/rulesets", None)
    assert len(rulesets) == 2
    assert all(isinstance(ruleset, Ruleset) for ruleset in rulesets)
    assert [r.id for r in rulesets] == ["ruleset-1", "ruleset-2"]
    assert rulesets[0].phase == RulesetPhase.HTTP_REQUEST_FIREWALL_CUSTOM
    assert rulesets[1].phase == RulesetPhase.HTTP_REQUEST_TRANSFORM


def test_create_zone_ruleset(executor, client, ruleset_payload):
    """Test create sends the ruleset body and returns the stored ruleset."""
    ruleset = Ruleset(
        name="block-bad-bots",
        description="",
        kind=RulesetKind.ZONE,
        phase=RulesetPhase.HTTP_REQUEST_FIREWALL_CUSTOM,
        rules=[
            RulesetRule(
                action=RulesetRuleAction.BLOCK,
                expression="(http.user_agent contains \"bot\")",
                description="",
                enabled=True,
            )
        ],
    )

    created = client.create_zone_ruleset("abc123", ruleset)

    executor.execute.assert_called_once_with(None, "POST", "/zones/abc123/rulesets", {
        "name": "block-bad-bots",
        "description": "",
        "kind": "zone",
        "phase": "http_request_firewall_custom",
        "rules": [
            {
                "action": "block",
                "expression": "(http.user_agent contains \"bot\")",
                "description": "",
                "enabled": True,
            }
        ],
    })
    assert created.id == ruleset_payload["id"]
    assert created.version == "1"
    assert created.last_updated is not None
    assert created.rules[0].action == RulesetRuleAction.BLOCK


def test_get_account_ruleset(executor, client, ruleset_payload):
    """Test getting a ruleset decodes the result."""
    ruleset = client.get_account_ruleset("acc1", ruleset_payload["id"])

    assert ruleset.name == "block-bad-bots"
    assert ruleset.kind == RulesetKind.ZONE
    assert ruleset.rules[0].ref == "62449e2e0de149619edb35e59c10d801"


def test_get_propagates_transport_error(executor, client):
    """Test transport errors reach the caller unchanged."""
    error = requests.exceptions.HTTPError("404 Client Error: Not Found")
    executor.execute.side_effect = error

    with pytest.raises(requests.exceptions.HTTPError) as excinfo:
        client.get_zone_ruleset("abc123", "does-not-exist")

    assert excinfo.value is error


def test_decode_error(executor, client):
    """Test an unparseable body raises a decode error."""
    executor.execute.return_value = b"<html>gateway error</html>"

    with pytest.raises(DecodeError) as excinfo:
        client.list_zone_rulesets("abc123")

    assert "error unmarshalling the JSON response" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, ValidationError)


def test_decode_error_on_wrong_shape(executor, client):
    """Test a body with the wrong result shape raises a decode error."""
    executor.execute.return_value = envelope({"not": "a list"})

    with pytest.raises(DecodeError):
        client.list_account_rulesets("acc1")


def test_update_sends_description_and_rules_only(executor, client, ruleset_payload):
    """Test update sends exactly the description and the rules."""
    current = Ruleset.model_validate(ruleset_payload)

    client.update_zone_ruleset("abc123", current.id, "new description", current.rules)

    body = executor.execute.call_args[0][3]
    assert set(body.keys()) == {"description", "rules"}
    assert body["description"] == "new description"
    assert body["rules"] == [rule.to_payload() for rule in current.rules]


def test_update_keeps_rule_order(executor, client):
    """Test rule order is sent unchanged."""
    rules = [RulesetRule(ref=str(i), action="log", expression="true") for i in range(5)]

    client.update_account_ruleset("acc1", "rs1", "", list(reversed(rules)))

    body = executor.execute.call_args[0][3]
    assert [rule["ref"] for rule in body["rules"]] == ["4", "3", "2", "1", "0"]


def test_delete_empty_body(executor, client):
    """Test delete succeeds on an empty response."""
    executor.execute.return_value = b""

    assert client.delete_zone_ruleset("abc123", "rs1") is None


def test_delete_with_body_is_error(executor, client):
    """Test delete treats any response body as an error."""
    body = '{"success":false,"errors":[{"code":10000,"message":"nope"}]}'
    executor.execute.return_value = body.encode()

    with pytest.raises(UnexpectedBodyError) as excinfo:
        client.delete_account_ruleset("acc1", "rs1")

    assert excinfo.value.body == body
    assert body in str(excinfo.value)


def test_delete_propagates_transport_error(executor, client):
    """Test delete does not wrap transport errors."""
    executor.execute.side_effect = requests.exceptions.ConnectionError("refused")

    with pytest.raises(requests.exceptions.ConnectionError):
        client.delete_zone_ruleset("abc123", "rs1")


def test_context_is_passed_through(executor, client):
    """Test the caller's context reaches the executor unchanged."""
    context = object()

    client.get_zone_ruleset("abc123", "rs1", context=context)

    assert executor.execute.call_args[0][0] is context


def test_list_null_result(executor, client):
    """Test a null result decodes as an empty list."""
    executor.execute.return_value = envelope(None)

    assert client.list_zone_rulesets("abc123") == []


def test_get_null_result(executor, client):
    """Test a null result decodes as an empty ruleset."""
    executor.execute.return_value = envelope(None)

    ruleset = client.get_zone_ruleset("abc123", "rs1")

    assert ruleset == Ruleset()
    assert ruleset.rules == []
