from fastapi import APIRouter

from multistream.models.common import HealthResponse, ServiceDescriptor

router = APIRouter(tags=["meta"])

API_NAME = "MultiStream API"
API_VERSION = "1.0.0"

ENDPOINTS = [
    "GET /api/v1/search?platform={platform}&query={query}",
    "GET /api/v1/stream/{platform}/{id}",
    "GET /api/health",
]


@router.get("/")
def root() -> ServiceDescriptor:
    return ServiceDescriptor(name=API_NAME, version=API_VERSION, endpoints=ENDPOINTS)


@router.get("/api/health")
def health() -> HealthResponse:
    return HealthResponse(status="healthy")


@router.get("/api/hello")
def hello() -> dict:
    """Legacy greeting kept for older frontends."""
    return {"message": "Hello from MultiStream!", "status": "ok"}
