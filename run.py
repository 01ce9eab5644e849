import uvicorn
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from view.case_view import router as case_router
from common.config import Config, require_mongo_uri
from common.db import CaseStore
from common.logging import logger


def create_app(store: CaseStore = None) -> FastAPI:
    """Build the intake API. Without an explicit store one is built from Config at startup."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if store is None:
            app.state.case_store = CaseStore.from_config(require_mongo_uri())
        yield

    app = FastAPI(
        title=Config.APP_NAME,
        version=Config.APP_VERSION,
        description="Receives legal case intake submissions and stores them in MongoDB",
        lifespan=lifespan
    )
    if store is not None:
        app.state.case_store = store

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(case_router, prefix="/api")

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "service": Config.APP_NAME,
            "version": Config.APP_VERSION
        }

    return app


app = create_app()


def main():
    """Check configuration and serve the intake API"""
    require_mongo_uri()
    logger.info(
        f"Backend server listening at http://localhost:{Config.PORT}")
    uvicorn.run(app, host=Config.HOST, port=Config.PORT, log_level="info")


if __name__ == "__main__":
    main()
