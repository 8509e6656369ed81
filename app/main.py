import logging
import sys
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import config
from app.core.db.engine import check_database_connection
from app.core.error_handler import global_exception_handler, http_exception_handler
from app.modules.dashboard import router as dashboard_router
from app.modules.retailer_dashboard import router as retailer_dashboard_router

# Configure logging to output to console
logging.basicConfig(
    level=config.log_level.upper(),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)
logger.info("Starting Wholesale Portal API...")

app = FastAPI(
    title="Wholesale Portal API",
    description="B2B wholesale marketplace dashboards for wholesalers and retailers",
    version="1.0.0",
    docs_url=None if config.is_production else "/docs",
    redoc_url=None if config.is_production else "/redoc",
)

# Every error leaves as {"error": <message>}
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

# Middlewares
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers with /api prefix
app.include_router(dashboard_router, prefix="/api")
app.include_router(retailer_dashboard_router, prefix="/api")


@app.get("/")
async def root() -> dict:
    return {"ok": True, "msg": "B2B Wholesale Portal API"}


@app.get("/health")
async def health():
    """Liveness plus a SELECT 1 against the database."""
    if await check_database_connection():
        return {"status": "ok", "database": True}
    return JSONResponse(status_code=503, content={"status": "degraded", "database": False})
