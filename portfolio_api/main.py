from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from portfolio_api.core.config import settings
from portfolio_api.core.logging import setup_logging
from portfolio_api.api.error_handlers import register_error_handlers

from portfolio_api.api.v1.public.validate import router as validate_router


setup_logging(settings.log_level)

app = FastAPI(
    title="Portfolio API",
    version="1.0.0",
    debug=settings.debug,
)

# CORS
origins = settings.allowed_origins_list or ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

register_error_handlers(app)

# -----------------------------------------------------------------------------
# Routers
app.include_router(validate_router, prefix="/api", tags=["public:codes"])
