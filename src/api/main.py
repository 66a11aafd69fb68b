"""FastAPI application for the store name generator."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.middleware.sessions import SessionMiddleware
from starlette.status import (
    HTTP_204_NO_CONTENT,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_502_BAD_GATEWAY,
    HTTP_503_SERVICE_UNAVAILABLE,
)

from src.api.models import ErrorResponse, GenerateRequest, GenerateResponse
from src.api.session_manager import PageSession, SessionManager
from src.chains.name_pipeline import GenerationFailure, NameRequestPipeline
from src.config import get_settings
from src.llm import TextGenerator, get_text_generator

settings = get_settings()

# Configure logging for Cloud Run
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

SESSION_KEY = "page_session_id"

# Global instances (generator is initialized on startup)
text_generator: TextGenerator | None = None
session_manager = SessionManager(
    ttl_seconds=settings.session_ttl_seconds,
    copy_reset_seconds=settings.copy_feedback_seconds,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Initialize and cleanup resources."""
    global text_generator

    logger.info("Initializing API resources...")
    text_generator = get_text_generator()

    yield

    logger.info("Cleaning up API resources...")


app = FastAPI(
    title="AI Store Name Generator API",
    description="Generates brandable store names from a short store description",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    SessionMiddleware,
    secret_key=settings.session_secret_key or "dev-secret-key-change-in-production",
    max_age=86400,  # 24 hours
    same_site="lax",
    https_only=settings.is_production,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Configure templates and static files
BASE_DIR = Path(__file__).resolve().parent.parent
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))
app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")
app.state.templates = templates


def get_page_session(request: Request) -> PageSession:
    """Get the caller's page session, creating one if needed."""
    session = session_manager.get_or_create(request.session.get(SESSION_KEY))
    request.session[SESSION_KEY] = session.id
    return session


def _page_context(session: PageSession) -> dict:
    return {
        "state": session.state,
        "shopify_trial_url": settings.shopify_trial_url,
        "support_url": settings.support_url,
        "refresh_ms": int(settings.copy_feedback_seconds * 1000) + 100,
    }


def _get_name(session: PageSession, index: int) -> str:
    names = session.state.names
    if not 0 <= index < len(names):
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Name not found")
    return names[index]


@app.get("/")
async def index(request: Request):
    """Render the main page with a fresh session state."""
    session_manager.discard(request.session.get(SESSION_KEY))
    session = get_page_session(request)
    return templates.TemplateResponse(request, "index.html", _page_context(session))


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


@app.post("/ui/generate")
async def ui_generate(request: Request):
    """Generate names and return the result partial for HTMX.

    A blank description returns 204 so HTMX leaves the page untouched.
    """
    session = get_page_session(request)

    form_data = await request.form()
    description = str(form_data.get("description", ""))

    if not description.strip():
        return Response(status_code=HTTP_204_NO_CONTENT)
    if session.state.is_loading:
        raise HTTPException(
            status_code=HTTP_409_CONFLICT,
            detail="A name request is already in progress",
        )

    pipeline = NameRequestPipeline(text_generator, state=session.state)
    await pipeline.generate(description)

    return templates.TemplateResponse(request, "partials/result.html", _page_context(session))


@app.post("/ui/copy/{index}")
async def ui_copy(request: Request, index: int):
    """Record a copied name and return the button in its copied state.

    The browser writes to the clipboard itself; the server only tracks
    which name was copied last. A previously copied button is reset
    out-of-band in the same response.
    """
    session = get_page_session(request)
    name = _get_name(session, index)

    previous_index = session.state.copied_index
    if previous_index == index or previous_index not in range(len(session.state.names)):
        previous_index = None
    session.copy_feedback.copy(name, index)

    context = _page_context(session) | {
        "name": name,
        "index": index,
        "previous_index": previous_index,
        "previous_name": (
            session.state.names[previous_index] if previous_index is not None else None
        ),
    }
    return templates.TemplateResponse(request, "partials/copy_response.html", context)


@app.get("/ui/copy/{index}")
async def ui_copy_status(request: Request, index: int):
    """Re-render a copy button from the current state."""
    session = get_page_session(request)
    name = _get_name(session, index)

    context = _page_context(session) | {"name": name, "index": index}
    return templates.TemplateResponse(request, "partials/copy_button.html", context)


@app.get("/ui/state")
async def ui_state(request: Request) -> dict:
    """Return the caller's page state as JSON."""
    session = get_page_session(request)
    return session.state.model_dump(mode="json")


@app.post(
    "/generate",
    response_model=GenerateResponse,
    responses={
        502: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def generate_names(body: GenerateRequest) -> GenerateResponse:
    """Generate store names from a description.

    Args:
        body: Generation request with the store description.

    Returns:
        Generated store names.
    """
    pipeline = NameRequestPipeline(text_generator)
    outcome = await pipeline.generate(body.description)

    if outcome is None:
        raise HTTPException(
            status_code=422,
            detail="description must not be blank",
        )
    if isinstance(outcome, GenerationFailure):
        status_code = (
            HTTP_503_SERVICE_UNAVAILABLE
            if outcome.kind == "not_configured"
            else HTTP_502_BAD_GATEWAY
        )
        raise HTTPException(status_code=status_code, detail=outcome.error)

    return GenerateResponse(names=outcome.names)


def run() -> None:
    """Serve the app with uvicorn."""
    uvicorn.run(
        "src.api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
