# api/main.py
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, APIRouter
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies import get_stores
from api.errors import ErrorMiddleware, register_error_handlers
from api.routes import auth, books, list_items
from core.config import get_settings
from core.sa.database import get_database
from core.utils.logging import configure_logging

logger = logging.getLogger(__name__)

settings = get_settings()

@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level)
    if settings.uses_default_secret:
        logger.warning("JWT_SECRET is not set, tokens are signed with the development secret")
    # In-memory stores replace the database entirely
    if get_stores not in app.dependency_overrides:
        get_database().init_db()
    yield

app = FastAPI(title="Bookshelf API", version="0.1.0", lifespan=lifespan)

app.add_middleware(ErrorMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

@app.get("/health")
def health_check():
    return {"status": "ok"}

api_router = APIRouter(prefix="/api")
api_router.include_router(auth.router)
api_router.include_router(books.router)
api_router.include_router(list_items.router)
app.include_router(api_router)
