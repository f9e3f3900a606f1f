"""Marine Tracking FastAPI application.

Serves the read-side marine tracking query over HTTP. Every request runs
inside the Tracking domain context and logs with the request bound to its
context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from protean.integrations.fastapi import register_exception_handlers
from tracking.api import router as tracking_router
from tracking.domain import tracking
from tracking.utils.logging import add_context, clear_context

# Initialized at import so uvicorn workers share one domain.
# PROTEAN_ENV picks the config overlay.
tracking.init()

app = FastAPI(
    title="Marine Tracking API",
    description="Consolidated marine shipment tracking per sales order",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["X-Ship-To-Ids"],
)

register_exception_handlers(app)


@app.middleware("http")
async def tracking_context_middleware(request: Request, call_next):
    """Push the Tracking domain context and bind the request to the log context."""
    clear_context()
    add_context(method=request.method, path=request.url.path)
    with tracking.domain_context():
        return await call_next(request)


app.include_router(tracking_router)


@app.get("/health")
async def health():
    return {"status": "ok", "domain": tracking.name}
