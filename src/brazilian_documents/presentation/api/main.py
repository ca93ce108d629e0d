from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from brazilian_documents.config import configure_logging
from brazilian_documents.domain.errors import DocumentError
from brazilian_documents.presentation.api.routes.documents import registry
from brazilian_documents.presentation.api.routes.documents import router as documents_router
from brazilian_documents.presentation.api.routes.health import router as health_router

configure_logging()

app = FastAPI(title="Brazilian Documents", version="0.1.0")
app.include_router(health_router)
app.include_router(documents_router)


@app.exception_handler(DocumentError)
def document_error(request: Request, exc: DocumentError) -> JSONResponse:
    kind = exc.kind.value if exc.kind else None
    return JSONResponse(status_code=422, content={"detail": exc.message, "kind": kind})


@app.get("/metrics")
def metrics() -> Response:  # type: ignore[misc]
    data = generate_latest(registry)
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)
