from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.router import api_router
from infrastructure.i18n import I18nMiddleware
from infrastructure.logging import get_module_logger
from infrastructure.services import get_i18n_service, get_settings
from server.lifespan import lifespan

logger = get_module_logger()
settings = get_settings()


handler = FastAPI(lifespan=lifespan)

allow_origins = (
    ["*"]
    if settings.is_production
    else [
        "http://localhost:8000",
        "http://127.0.0.1:8000",
    ]
)
handler.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
handler.add_middleware(I18nMiddleware, service=get_i18n_service())


handler.include_router(api_router)
