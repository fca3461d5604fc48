"""
Response envelopes and request bodies for the rulesets endpoints.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from .rule import RulesetRule
from .ruleset import Ruleset


class ResponseInfo(BaseModel):
    """An error or message entry in the common response envelope."""
    code: Optional[int] = None
    message: Optional[str] = None

    model_config = {
        "extra": "ignore"
    }


class Response(BaseModel):
    """Fields shared by every API response."""
    success: Optional[bool] = None
    errors: List[ResponseInfo] = Field(default_factory=list)
    messages: List[ResponseInfo] = Field(default_factory=list)

    model_config = {
        "extra": "ignore"
    }


class ListRulesetResponse(Response):
    """Response holding all rulesets of a zone or account."""
    result: List[Ruleset] = Field(default_factory=list)

    @field_validator("result", mode="before")
    def validate_result(cls, v):
        """Treat a null result as an empty list."""
        if v is None:
            return []
        return v


class RulesetResponse(Response):
    """Response holding a single ruleset (get, create and update)."""
    result: Ruleset = Field(default_factory=Ruleset)

    @field_validator("result", mode="before")
    def validate_result(cls, v):
        """Treat a null result as an empty ruleset."""
        if v is None:
            return Ruleset()
        return v


class UpdateRulesetRequest(BaseModel):
    """Body of an update. Identity, kind and phase cannot change through it."""
    description: str = ""
    rules: List[RulesetRule] = Field(default_factory=list)

    def to_payload(self) -> Dict[str, Any]:
        """Return both fields, each rule without its unset fields."""
        return {
            "description": self.description,
            "rules": [rule.to_payload() for rule in self.rules],
        }
