from fastapi import FastAPI
from fastapi.responses import JSONResponse, PlainTextResponse

# Internal imports
from config import config
from api.tool_routes import tool_router
from services.discovery import discovery_document

import contextlib
import logging
import middleware

logger = logging.getLogger(__name__)


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Handles startup and shutdown events for the application.
    Code before 'yield' runs on startup.
    Code after 'yield' runs on shutdown.
    """
    logger.info("Tool server starting up: %s", config)
    if not config.unsplash_access_key:
        logger.warning("UNSPLASH_ACCESS_KEY not set - image tools will answer 503.")

    yield

    logger.info("Tool server shutting down.")

# --- FastAPI App Initialization ---
app = FastAPI(
    lifespan=lifespan,
    title="Experiment Tool Server",
    version="1.0.0",
    description="Tools for an orchestration platform: experiment runtime estimation and image search."
)

app.add_middleware(middleware.RequestIDMiddleware)
app.include_router(tool_router)

# --- API Endpoints ---

@app.get("/", response_class=PlainTextResponse)
def root():
    return "Tool server is running. Visit /discovery for tool discovery."

@app.get("/health")
def health_check():
    return JSONResponse(content={"status": "healthy"}, status_code=200)

# Discovery endpoint for the orchestration platform
@app.get("/discovery")
def discovery():
    """List the tools this server exposes and their parameters."""
    return discovery_document()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.host, port=config.port)
