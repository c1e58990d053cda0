"""FastAPI application factory."""

from fastapi import FastAPI

from ito.database.base import LinkStoreBase
from ito.manager import LinkManager
from ito.resolver import RedirectResolver
from .error_handlers import install_error_handlers
from .middleware.logging import LoggingMiddleware
from .web import web_router


def attach_store(app: FastAPI, store: LinkStoreBase, logger=None) -> None:
    """Wire a store and the services built on it into app state.
    
    Args:
        app: The application
        store: Link store shared by every request
        logger: Optional logger passed to the services
    """
    app.state.store = store
    app.state.resolver = RedirectResolver(store, logger=logger)
    app.state.manager = LinkManager(store, logger=logger)


def create_app(store, config, logger=None) -> FastAPI:
    """Create and configure FastAPI application.
    
    Args:
        store: Link store instance, or None when a lifespan handler
            attaches one at startup
        config: Configuration instance
        logger: Optional logger for the services
        
    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="ito",
        description="Small URL shortener",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    
    app.state.config = config
    if store is not None:
        attach_store(app, store, logger=logger)
    
    app.add_middleware(LoggingMiddleware)
    install_error_handlers(app)
    
    app.include_router(web_router, tags=["Web"])
    
    return app
