"""
Model for rulesets.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from .rule import RulesetRule


class RulesetKind(str, Enum):
    """Kinds of ruleset."""
    CUSTOM = "custom"
    MANAGED = "managed"
    ROOT = "root"
    SCHEMA = "schema"
    ZONE = "zone"


class RulesetPhase(str, Enum):
    """Point in the request pipeline at which a ruleset is evaluated."""
    DDOS_L7 = "ddos_l7"
    HTTP_REQUEST_FIREWALL_CUSTOM = "http_request_firewall_custom"
    HTTP_REQUEST_FIREWALL_MANAGED = "http_request_firewall_managed"
    HTTP_REQUEST_MAIN = "http_request_main"
    HTTP_REQUEST_SANITIZE = "http_request_sanitize"
    HTTP_REQUEST_TRANSFORM = "http_request_transform"
    MAGIC_TRANSIT = "magic_transit"


class Ruleset(BaseModel):
    """
    Model representing a ruleset.

    id, version and last_updated are assigned by the service on create and are
    omitted from payloads while unset. Rule order is evaluation order and is
    kept exactly as given.

    Timestamps are held as datetime, so precision is limited to microseconds;
    finer fractional digits are truncated on decode.
    """
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    kind: Optional[Annotated[Union[RulesetKind, str], Field(union_mode="left_to_right")]] = None
    version: Optional[str] = None
    last_updated: Optional[datetime] = None
    phase: Optional[Annotated[Union[RulesetPhase, str], Field(union_mode="left_to_right")]] = None
    rules: List[RulesetRule] = Field(default_factory=list)

    model_config = {
        "extra": "ignore"
    }

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON-ready representation, omitting unset fields."""
        return self.model_dump(mode="json", exclude_none=True)
