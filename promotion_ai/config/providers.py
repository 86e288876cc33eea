"""Provider descriptor dataclass."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProviderDescriptor:
    """Immutable connection details for one text-generation provider.

    Built once at startup from :class:`~promotion_ai.config.Settings`.
    ``kind`` selects the wire format of the adapter (``openai`` or
    ``anthropic``).
    """

    name: str
    endpoint: str
    credential: str
    model_id: str
    request_timeout_ms: int = 10000
    kind: str = "openai"

    @property
    def has_credential(self) -> bool:
        return bool(self.credential and self.credential.strip())

    @property
    def timeout_seconds(self) -> float:
        return self.request_timeout_ms / 1000.0
