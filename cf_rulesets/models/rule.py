"""
Model for a single ruleset rule.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from .action_parameters import RulesetRuleActionParameters


class RulesetRuleAction(str, Enum):
    """Allowed values for the rule action."""
    BLOCK = "block"
    CHALLENGE = "challenge"
    DDOS_DYNAMIC = "ddos_dynamic"
    EXECUTE = "execute"
    FORCE_CONNECTION_CLOSE = "force_connection_close"
    JS_CHALLENGE = "js_challenge"
    LOG = "log"
    REWRITE = "rewrite"
    SCORE = "score"
    SKIP = "skip"


class RulesetRule(BaseModel):
    """Model for a rule inside a ruleset."""
    id: Optional[str] = None
    version: Optional[str] = None
    action: Optional[Annotated[Union[RulesetRuleAction, str], Field(union_mode="left_to_right")]] = None
    action_parameters: Optional[RulesetRuleActionParameters] = None
    expression: Optional[str] = None
    description: Optional[str] = None
    last_updated: Optional[datetime] = None
    ref: Optional[str] = None
    # Omitted while unset, in which case the service default (enabled) applies.
    enabled: Optional[bool] = None
    categories: Optional[List[str]] = None
    score_threshold: Optional[int] = None

    model_config = {
        "extra": "ignore"
    }

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON-ready representation, omitting unset fields."""
        return self.model_dump(mode="json", exclude_none=True)
