"""
Errors raised by the rulesets client.

Transport failures are not represented here: whatever the request executor
raises reaches the caller untouched.
"""

ERR_UNMARSHAL = "error unmarshalling the JSON response"
ERR_MAKE_REQUEST = "error from makeRequest"


class RulesetsError(Exception):
    """Base class for errors raised by this package."""


class DecodeError(RulesetsError):
    """The response body does not match the expected envelope."""

    def __init__(self, message: str = ERR_UNMARSHAL):
        super().__init__(message)


class UnexpectedBodyError(RulesetsError):
    """A call whose success is an empty response returned a body."""

    def __init__(self, body: str):
        self.body = body
        super().__init__(f"{ERR_MAKE_REQUEST}: {body}")
