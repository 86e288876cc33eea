"""Exception hierarchy for the PromotionAI backend."""


class PromotionAIError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(PromotionAIError):
    """Raised when provider configuration cannot be turned into an adapter."""


class MissingPromptError(PromotionAIError):
    """Raised when a request arrives without prompt text."""

    def __init__(self, message: str = "Missing prompt"):
        super().__init__(message)
        self.message = message


class ProviderError(PromotionAIError):
    """Raised by a provider adapter when one attempt fails.

    Covers transport errors, non-2xx responses, malformed or empty bodies and
    timeouts. The router absorbs these and moves to the next candidate.
    """

    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider}: {message}")
        self.provider = provider
        self.message = message


class PreferredProviderError(PromotionAIError):
    """Raised when a caller-pinned provider fails; no other provider is tried."""

    def __init__(self, provider: str, message: str):
        super().__init__(f"Preferred provider '{provider}' failed: {message}")
        self.provider = provider
        self.message = message
