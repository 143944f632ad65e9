"""Errors raised while driving the coffee shop and validating its answers."""


class PostConditionError(AssertionError):
    """The service answered differently than the model predicted."""


class ActionSequenceError(AssertionError):
    """An action sequence failed; wraps the first failing step."""


class ServiceError(Exception):
    """The coffee shop could not be reached."""


class FaultProxyError(Exception):
    """The fault-injection proxy could not be toggled."""


class ConfigurationError(Exception):
    """Model configuration is incorrect."""
