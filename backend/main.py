"""
App setup, middleware, lifespan
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from core.config import settings
from core.startup import setup_logging, initialize_search_system, cleanup_search_system
from api.routes import root, tools


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown logic"""
    setup_logging()
    await initialize_search_system(app)
    try:
        yield
    finally:
        # shutdown
        await cleanup_search_system(app)


app = FastAPI(title="ESG Search Tools API", lifespan=lifespan)


# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allows all origins
    allow_credentials=True,
    allow_methods=["*"],  # Allows all methods
    allow_headers=["*"],  # Allows all headers
)

# Include routes
app.include_router(root.router)
app.include_router(tools.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
