"""Content generation endpoint."""

from fastapi import APIRouter, Depends

from promotion_ai.api.dependencies import get_router
from promotion_ai.api.schemas import AttemptEntry, ErrorResponse, PromptRequest, PromptResponse
from promotion_ai.router import ProviderRouter

router = APIRouter(prefix="/api", tags=["generation"])


@router.post(
    "/prompt",
    response_model=PromptResponse,
    responses={400: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def generate_content(
    request: PromptRequest,
    provider_router: ProviderRouter = Depends(get_router),
) -> PromptResponse:
    """
    Generate marketing content for a prompt.

    Providers are tried in priority order and the first answer wins. When
    every provider fails, a locally generated text is returned with
    ``providerUsed: "fallback"``.
    """
    result = await provider_router.route(request.to_generation_request())
    return PromptResponse(
        body=result.body,
        provider_used=result.provider_used,
        attempt_log=[AttemptEntry(**entry.to_dict()) for entry in result.attempt_log],
    )
