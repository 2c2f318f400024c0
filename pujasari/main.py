"""
Pujasari API - FastAPI application
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from pujasari.api import admins, customers, orders, products, recipes
from pujasari.core.config import settings
from pujasari.core.database import DocumentStore, MongoStore
from pujasari.core.errors import register_exception_handlers

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the document store unless one was injected, and close what we opened"""
    owns_store = getattr(app.state, "store", None) is None
    if owns_store:
        app.state.store = MongoStore.from_settings(settings)
        logger.info(f"Connected to database {settings.DATABASE_NAME}")
    yield
    if owns_store:
        await app.state.store.close()
        logger.info("Database connection closed")

def create_app(store: Optional[DocumentStore] = None) -> FastAPI:
    logging.basicConfig(level=settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description=settings.DESCRIPTION,
        version=settings.VERSION,
        docs_url=settings.DOCS_URL,
        lifespan=lifespan,
    )
    if store is not None:
        app.state.store = store

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(orders.router, prefix="/orders")
    app.include_router(products.router, prefix="/products")
    app.include_router(recipes.router, prefix="/recipes")
    app.include_router(customers.router, prefix="/customers")
    app.include_router(admins.router, prefix="/admins")

    # Health check endpoint
    @app.get("/health")
    async def health_check(request: Request):
        """Health check endpoint"""
        database_ok = await request.app.state.store.ping()
        return {
            "status": "healthy" if database_ok else "degraded",
            "database": "connected" if database_ok else "unavailable",
        }

    @app.get("/")
    async def root():
        """API root endpoint"""
        return {
            "message": settings.DESCRIPTION,
            "version": settings.VERSION,
            "docs": settings.DOCS_URL,
            "health": "/health",
        }

    return app

app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=settings.bind_host, port=settings.PORT)
