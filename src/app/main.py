"""
SQL Export API Entry Point
==========================

Builds the FastAPI app: CORS, error envelope, export routes and one
route per bundled SQL script.

Run with: uvicorn src.app.main:app --reload
Seed the demo database first: python -m src.init_demo_db
"""

# Load environment variables FIRST, before any other imports
from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.routes import router, register_sql_file_routes
from src.app.config import VERSION, APP_NAME, get_sql_dir
from src.app.exceptions import global_exception_handler
from src.app.logging_config import configure_logging


configure_logging()


# =============================================================================
# APP INITIALIZATION
# =============================================================================

app = FastAPI(
    title=APP_NAME,
    description="Expose SQL query results as JSON or formatted Excel files",
    version=VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)


# =============================================================================
# MIDDLEWARE
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition", "X-Row-Count", "X-Column-Count", "X-Total-Count"],
)


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

app.add_exception_handler(Exception, global_exception_handler)


# =============================================================================
# ROUTES
# =============================================================================

app.include_router(router, tags=["Export"])

# One POST /api/sql/<name> route per script present at start-up
SQL_SCRIPT_ROUTES = register_sql_file_routes(app, get_sql_dir())


# =============================================================================
# ROOT
# =============================================================================

@app.get("/")
def root():
    """Root endpoint with API information."""
    return {
        "name": APP_NAME,
        "version": VERSION,
        "docs": "/docs",
        "health": "/health",
        "endpoints": {
            "query": "POST /api/query",
            "scripts": "POST /api/scripts",
            "script_routes": [f"POST /api/sql/{name}" for name in SQL_SCRIPT_ROUTES],
            "demo": "GET /api/demo-export?type=basic|filtered|ordered|excluded",
        }
    }
