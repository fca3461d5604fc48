"""
Models for rule action parameters.

The remote service decides which fields are meaningful for which action, so
everything here is optional and no combination is rejected client-side.
"""

from enum import Enum
from typing import Annotated, Dict, List, Optional, Union

from pydantic import BaseModel, Field


class RulesetActionParameterProduct(str, Enum):
    """Products that a "skip" action can bypass."""
    BIC = "bic"
    HOT = "hot"
    RATE_LIMIT = "ratelimit"
    SECURITY_LEVEL = "securityLevel"
    UA_BLOCK = "uablock"
    WAF = "waf"
    ZONE_LOCKDOWN = "zonelockdown"


class RulesetRuleActionParametersHTTPHeaderOperation(str, Enum):
    """Operations available for HTTP header rewrites."""
    REMOVE = "remove"
    SET = "set"


class RulesetRuleActionParametersURIPath(BaseModel):
    """Path portion of a URI rewrite."""
    expression: Optional[str] = None

    model_config = {
        "extra": "ignore"
    }


class RulesetRuleActionParametersURIQuery(BaseModel):
    """Query portion of a URI rewrite."""
    value: Optional[str] = None
    expression: Optional[str] = None

    model_config = {
        "extra": "ignore"
    }


class RulesetRuleActionParametersURI(BaseModel):
    """URI rewrite specification."""
    path: Optional[RulesetRuleActionParametersURIPath] = None
    query: Optional[RulesetRuleActionParametersURIQuery] = None
    origin: Optional[bool] = None

    model_config = {
        "extra": "ignore"
    }


class RulesetRuleActionParametersHTTPHeader(BaseModel):
    """A single header rewrite, keyed by header name in the parent mapping."""
    operation: Optional[Annotated[
        Union[RulesetRuleActionParametersHTTPHeaderOperation, str],
        Field(union_mode="left_to_right"),
    ]] = None
    value: Optional[str] = None
    expression: Optional[str] = None

    model_config = {
        "extra": "ignore"
    }


class RulesetRuleActionParameters(BaseModel):
    """Action specific configuration attached to a rule."""
    # "execute"
    id: Optional[str] = None
    ruleset: Optional[str] = None

    # "score"
    increment: Optional[int] = None

    # "rewrite"
    uri: Optional[RulesetRuleActionParametersURI] = None
    headers: Optional[Dict[str, RulesetRuleActionParametersHTTPHeader]] = None

    # "skip"
    products: Optional[List[Annotated[
        Union[RulesetActionParameterProduct, str],
        Field(union_mode="left_to_right"),
    ]]] = None

    model_config = {
        "extra": "ignore"
    }
