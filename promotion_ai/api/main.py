from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from promotion_ai import __version__
from promotion_ai.api.routes import health_router, image_router, prompt_router, status_router
from promotion_ai.exceptions import MissingPromptError, PreferredProviderError

app = FastAPI(
    title="PromotionAI API",
    description="Marketing content and image generation across AI providers",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(MissingPromptError)
async def missing_prompt_handler(request: Request, exc: MissingPromptError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": exc.message})


@app.exception_handler(PreferredProviderError)
async def preferred_provider_handler(request: Request, exc: PreferredProviderError) -> JSONResponse:
    return JSONResponse(
        status_code=502,
        content={"error": str(exc), "provider": exc.provider},
    )


app.include_router(health_router)
app.include_router(prompt_router)
app.include_router(image_router)
app.include_router(status_router)
