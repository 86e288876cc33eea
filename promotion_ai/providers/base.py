"""Base abstractions for text-generation providers."""

from abc import ABC, abstractmethod

from promotion_ai.config.providers import ProviderDescriptor
from promotion_ai.models import PromptSpec


class BaseTextProvider(ABC):
    """Abstract base class for text providers.

    An adapter wraps exactly one :class:`ProviderDescriptor`. Adding a new
    provider means adding one subclass and registering it with
    :class:`~promotion_ai.providers.factory.ProviderFactory`.
    """

    def __init__(self, descriptor: ProviderDescriptor):
        self.descriptor = descriptor

    @property
    def name(self) -> str:
        return self.descriptor.name

    @property
    def model_name(self) -> str:
        """Return the model name/identifier for this provider."""
        return self.descriptor.model_id

    @property
    def has_credential(self) -> bool:
        return self.descriptor.has_credential

    @property
    def timeout_seconds(self) -> float:
        return self.descriptor.timeout_seconds

    @abstractmethod
    async def attempt(self, prompt: PromptSpec, timeout: float) -> str:
        """Send one completion request.

        Args:
            prompt: Final prompt and its token budget.
            timeout: Seconds to wait for the provider.

        Returns:
            The non-empty completion text.

        Raises:
            ProviderError: On transport failure, non-2xx status, malformed or
                empty body, or timeout.
        """
        pass

    @abstractmethod
    async def probe(self, timeout: float) -> str:
        """Check that the provider is reachable with the configured credential.

        Returns:
            A short human-readable detail string.

        Raises:
            ProviderError: If the provider cannot be reached.
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, model={self.model_name!r})"
