"""
Typed client for the zone and account Rulesets API.
"""

__version__ = "0.1.0"

from .client import RouteRoot, RulesetsClient
from .config import APIConfig, Settings
from .errors import DecodeError, RulesetsError, UnexpectedBodyError
from .models import Ruleset, RulesetRule, RulesetRuleActionParameters
from .transport import HTTPTransport, RequestContext, RequestExecutor

__all__ = [
    '__version__',
    'RulesetsClient',
    'RouteRoot',
    'APIConfig',
    'Settings',
    'HTTPTransport',
    'RequestContext',
    'RequestExecutor',
    'Ruleset',
    'RulesetRule',
    'RulesetRuleActionParameters',
    'RulesetsError',
    'DecodeError',
    'UnexpectedBodyError',
]
