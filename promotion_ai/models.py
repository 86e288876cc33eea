from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

FALLBACK_PROVIDER = "fallback"

@dataclass(frozen=True)
class StyleParameters:
    """Optional display hints for a generation request. No key is required."""
    tone: Optional[str] = None
    length: Optional[str] = None
    template: Optional[str] = None
    creativity: Optional[Union[int, float, str]] = None
    business_type: Optional[str] = None
    tool: Optional[str] = None
    action: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "StyleParameters":
        """Build from a JSON mapping, accepting camelCase ``businessType``."""
        data = data or {}
        return cls(
            tone=data.get("tone"),
            length=data.get("length"),
            template=data.get("template"),
            creativity=data.get("creativity"),
            business_type=data.get("business_type", data.get("businessType")),
            tool=data.get("tool"),
            action=data.get("action"),
        )

@dataclass(frozen=True)
class GenerationRequest:
    """One inbound content-generation call."""
    text: str
    style: StyleParameters = field(default_factory=StyleParameters)
    preferred_provider: Optional[str] = None

@dataclass(frozen=True)
class PromptSpec:
    """Final prompt sent to a provider, with its completion budget."""
    text: str
    max_tokens: int = 600

@dataclass(frozen=True)
class AttemptRecord:
    """A failed provider attempt."""
    provider: str
    error: str

    def to_dict(self) -> Dict[str, str]:
        return {"provider": self.provider, "error": self.error}

@dataclass
class GenerationResult:
    """Outcome of routing one request."""
    body: str
    provider_used: str
    attempt_log: List[AttemptRecord] = field(default_factory=list)

    @property
    def is_fallback(self) -> bool:
        return self.provider_used == FALLBACK_PROVIDER

@dataclass(frozen=True)
class ProviderStatus:
    """Health probe outcome for one provider."""
    reachable: bool
    detail: str

@dataclass(frozen=True)
class ImageResult:
    """Image URLs for a prompt and where they came from."""
    images: List[str]
    source: str
    category: Optional[str] = None
