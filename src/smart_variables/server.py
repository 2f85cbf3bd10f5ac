"""FastAPI application – the HTTP gateway for editor integrations."""

from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from smart_variables.config import settings
from smart_variables.generation import GenerationError
from smart_variables.models import GenerationErrorCategory, NamingStyle, StyleMode, Suggestion
from smart_variables.store import ConfigError, ConfigKey
from smart_variables.styles import registry
from smart_variables.suggest import Cursor, InsertionError, StyleDetector, SuggestionService, TextDocument
from smart_variables.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):  # type: ignore[no-untyped-def]
    setup_logging()
    logger.info("server.startup", port=settings.api_port)
    yield
    logger.info("server.shutdown")


app = FastAPI(
    title="Smart Variables",
    description="Naming-style inference and identifier suggestions for code editors.",
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


_service: SuggestionService | None = None


def get_service() -> SuggestionService:
    global _service
    if _service is None:
        _service = SuggestionService()
    return _service


class DocumentRequest(BaseModel):
    text: str = Field(..., description="Full document text.")
    language: str = Field(..., min_length=1, description="Editor language id, e.g. 'python'.")
    line: int = Field(default=0, ge=0, description="Zero-based cursor line.")
    character: int = Field(default=0, ge=0, description="Zero-based cursor column.")

    def to_document(self) -> TextDocument:
        return TextDocument(self.text, self.language, Cursor(self.line, self.character))


class InferResponse(BaseModel):
    style: NamingStyle
    language: str
    default_style: NamingStyle
    in_class: bool = False
    in_function: bool = False
    in_interface: bool = False
    in_enum: bool = False
    is_constant_context: bool = False
    is_type_definition: bool = False
    identifiers: int = 0


class SuggestRequest(DocumentRequest):
    meaning: str = Field(..., min_length=1, description="What the identifier should mean.")
    style: NamingStyle | None = Field(default=None, description="Force a style instead of the configured one.")
    count: int | None = Field(default=None, ge=1, le=20)


class InsertRequest(DocumentRequest):
    candidate: str = Field(..., min_length=1, description="The chosen identifier.")


class InsertResponse(BaseModel):
    text: str
    line: int
    character: int


class ModeResponse(BaseModel):
    preferred_style: str


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = VERSION
    timestamp: str = ""


@app.get("/")
async def root():
    return {"message": "Smart Variables API is running", "docs": "/docs"}


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


@app.post("/style/infer", response_model=InferResponse)
async def infer_style(req: DocumentRequest) -> InferResponse:
    """Infer the naming style at the given cursor line."""
    document = req.to_document()
    snapshot, style = StyleDetector().analyze(document)
    return InferResponse(
        style=style,
        language=registry.resolve(req.language),
        default_style=registry.default_style(req.language),
        in_class=snapshot.in_class,
        in_function=snapshot.in_function,
        in_interface=snapshot.in_interface,
        in_enum=snapshot.in_enum,
        is_constant_context=snapshot.is_constant_context,
        is_type_definition=snapshot.is_type_definition,
        identifiers=len(snapshot.existing_identifiers),
    )


@app.post("/names/suggest", response_model=Suggestion)
async def suggest_names(
    req: SuggestRequest,
    service: SuggestionService = Depends(get_service),
) -> Suggestion:
    """Generate candidate identifiers for a meaning at the cursor."""
    try:
        return await service.suggest(
            req.meaning,
            req.to_document(),
            style=req.style,
            count=req.count,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except GenerationError as exc:
        logger.error("api.generation_error", error=exc.message, category=exc.category.value)
        status = 422 if exc.category in (
            GenerationErrorCategory.MISSING_API_KEY,
            GenerationErrorCategory.MISSING_MODEL,
        ) else 502
        raise HTTPException(
            status_code=status,
            detail={"message": exc.message, "category": exc.category.value},
        ) from exc


@app.post("/names/insert", response_model=InsertResponse)
async def insert_name(req: InsertRequest) -> InsertResponse:
    """Insert the chosen candidate at the cursor and return the edited text."""
    document = req.to_document()
    try:
        cursor = SuggestionService.insert(document, req.candidate)
    except InsertionError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return InsertResponse(text=document.text, line=cursor.line, character=cursor.character)


@app.get("/config/mode", response_model=ModeResponse)
async def get_mode(service: SuggestionService = Depends(get_service)) -> ModeResponse:
    try:
        preference = service.store.preference()
    except ConfigError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return ModeResponse(preferred_style=preference.value)


@app.post("/config/mode/toggle", response_model=ModeResponse)
async def toggle_mode(service: SuggestionService = Depends(get_service)) -> ModeResponse:
    """Switch between ``auto`` and ``ask``."""
    try:
        mode = service.toggle_mode()
    except ConfigError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return ModeResponse(preferred_style=mode.value)


@app.get("/config")
async def get_config(service: SuggestionService = Depends(get_service)) -> dict[str, Any]:
    """Return the effective configuration (no secrets)."""
    store = service.store
    return {
        "preferred_style": store.get(ConfigKey.PREFERRED_STYLE, StyleMode.AUTO.value),
        "base_url": store.get(ConfigKey.BASE_URL),
        "model_id": store.get(ConfigKey.MODEL_ID),
        "api_key_configured": bool(store.get(ConfigKey.API_KEY)),
        "languages": registry.available_languages(),
        "context_radius": settings.context_radius,
        "candidate_count": settings.candidate_count,
    }
