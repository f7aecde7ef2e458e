"""Gateway service entrypoint - HTTP front end of the food knowledge engine."""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from prometheus_client import make_asgi_app

from knowledge import get_service
from knowledge.service import KnowledgeService
from shared.logging import configure_logging
from shared.middleware import RequestIdMiddleware
from shared.schemas import HealthResponse

from gateway.api.routes import router
from gateway.config import GatewaySettings

_settings: GatewaySettings | None = None


def get_settings() -> GatewaySettings:
    global _settings
    if _settings is None:
        _settings = GatewaySettings()
    return _settings


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Clients are created on first search, so missing credentials do not block startup.
    if getattr(app.state, "knowledge_service", None) is None:
        app.state.knowledge_service = get_service()
    yield


def create_app(knowledge_service: KnowledgeService | None = None) -> FastAPI:
    settings = get_settings()
    configure_logging(json_logs=settings.json_logs, level=settings.log_level)
    app = FastAPI(title="Food RAG Gateway", version="0.1.0", lifespan=lifespan)
    app.add_middleware(RequestIdMiddleware)
    app.state.knowledge_service = knowledge_service

    app.include_router(router)

    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    @app.get("/healthz", response_model=HealthResponse)
    async def healthz() -> HealthResponse:
        return HealthResponse(status="ok", service="gateway")

    @app.get("/readyz", response_model=HealthResponse)
    async def readyz() -> HealthResponse:
        topics = await app.state.knowledge_service.list_topics()
        if not topics:
            return HealthResponse(status="unhealthy", service="gateway", detail="no topics")
        return HealthResponse(status="ok", service="gateway")

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "gateway.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
    )
