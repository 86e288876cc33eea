from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from promotion_ai.models import GenerationRequest, StyleParameters

LEGACY_STYLE_KEYS = ("tone", "length", "template", "businessType", "creativity", "tool", "action")


class StyleParametersModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    tone: Optional[str] = None
    length: Optional[str] = None
    template: Optional[str] = None
    business_type: Optional[str] = Field(None, alias="businessType")
    creativity: Optional[Union[int, float, str]] = None
    tool: Optional[str] = None
    action: Optional[str] = None


class PromptRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: Optional[str] = Field(None, description="User prompt")
    prompt: Optional[str] = Field(None, description="Legacy name for text")
    preferred_provider: Optional[str] = Field(
        None, alias="preferredProvider", description="Pin the request to one provider"
    )
    style_parameters: Optional[StyleParametersModel] = Field(
        None, alias="styleParameters", description="Tone, length, template and creativity hints"
    )

    # Flat style keys sent by older clients
    tone: Optional[str] = None
    length: Optional[str] = None
    template: Optional[str] = None
    business_type: Optional[str] = Field(None, alias="businessType")
    creativity: Optional[Union[int, float, str]] = None
    tool: Optional[str] = None
    action: Optional[str] = None

    def to_generation_request(self) -> GenerationRequest:
        """Merge flat legacy keys under ``styleParameters``; nested values win."""
        style: Dict[str, Any] = {
            key: value
            for key, value in self.model_dump(by_alias=True).items()
            if key in LEGACY_STYLE_KEYS and value is not None
        }
        if self.style_parameters is not None:
            style.update(self.style_parameters.model_dump(by_alias=True, exclude_none=True))
        return GenerationRequest(
            text=self.text if self.text is not None else (self.prompt or ""),
            style=StyleParameters.from_dict(style),
            preferred_provider=self.preferred_provider or None,
        )


class AttemptEntry(BaseModel):
    provider: str = Field(..., description="Provider that was tried")
    error: str = Field(..., description="Why the attempt failed")


class PromptResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    body: str = Field(..., description="Generated content")
    provider_used: str = Field(..., alias="providerUsed", description="Provider name or 'fallback'")
    attempt_log: List[AttemptEntry] = Field(
        default_factory=list, alias="attemptLog", description="Failed attempts, in order"
    )


class ImageRequest(BaseModel):
    text: Optional[str] = Field(None, description="Image prompt")
    prompt: Optional[str] = Field(None, description="Legacy name for text")
    category: Optional[str] = Field(None, description="Gallery category")
    template: Optional[str] = Field(None, description="Legacy name for category")


class ImageResponse(BaseModel):
    images: List[str] = Field(..., description="Image URLs")
    source: str = Field(..., description="'ai', 'gallery' or 'placeholder'")
    category: Optional[str] = Field(None, description="Gallery category used")


class ProviderHealth(BaseModel):
    reachable: bool = Field(..., description="Whether the probe succeeded")
    detail: str = Field(..., description="Probe detail or error")


class HealthResponse(BaseModel):
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="API version")


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Error message")
    provider: Optional[str] = Field(None, description="Provider that failed, if any")
