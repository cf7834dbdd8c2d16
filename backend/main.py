import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.api.inspector import router as inspect_router
from backend.config import LOG_FORMAT, LOG_LEVEL

logging.basicConfig(
    level=LOG_LEVEL,
    format=LOG_FORMAT
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🚀 Schema Inspector API started")
    yield
    logger.info("🛑 Schema Inspector API shutting down")

# --------------------------------------------------
# App
# --------------------------------------------------

app = FastAPI(
    title="Schema Markup Inspector",
    description=(
        "Extracts JSON-LD, Microdata and RDFa from a page and returns "
        "one normalized record per schema type."
    ),
    version="1.0.0",
    lifespan=lifespan
)

# --------------------------------------------------
# CORS
# --------------------------------------------------

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# --------------------------------------------------
# Routers
# --------------------------------------------------

app.include_router(
    inspect_router,
    prefix="/api",
    tags=["Inspect"]
)

# --------------------------------------------------
# Health check
# --------------------------------------------------

@app.get("/health")
def health():
    return {
        "status": "ok",
        "service": "schema-inspector"
    }
