"""
Models for rulesets, rules and the API envelopes around them.
"""

from .action_parameters import (
    RulesetActionParameterProduct,
    RulesetRuleActionParameters,
    RulesetRuleActionParametersHTTPHeader,
    RulesetRuleActionParametersHTTPHeaderOperation,
    RulesetRuleActionParametersURI,
    RulesetRuleActionParametersURIPath,
    RulesetRuleActionParametersURIQuery,
)
from .responses import (
    ListRulesetResponse,
    Response,
    ResponseInfo,
    RulesetResponse,
    UpdateRulesetRequest,
)
from .rule import RulesetRule, RulesetRuleAction
from .ruleset import Ruleset, RulesetKind, RulesetPhase

__all__ = [
    'Ruleset',
    'RulesetKind',
    'RulesetPhase',
    'RulesetRule',
    'RulesetRuleAction',
    'RulesetRuleActionParameters',
    'RulesetRuleActionParametersURI',
    'RulesetRuleActionParametersURIPath',
    'RulesetRuleActionParametersURIQuery',
    'RulesetRuleActionParametersHTTPHeader',
    'RulesetRuleActionParametersHTTPHeaderOperation',
    'RulesetActionParameterProduct',
    'Response',
    'ResponseInfo',
    'ListRulesetResponse',
    'RulesetResponse',
    'UpdateRulesetRequest',
]
