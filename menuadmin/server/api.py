from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from menuadmin.logging_config import setup_logging

from .errors import register_exception_handlers
from .menu_profiles import router as menu_profiles_router
from .menus import router as menus_router
from .modules import router as modules_router
from .profiles import router as profiles_router
from .screens import router as screens_router
from .settings import get_settings

settings = get_settings()
setup_logging(settings.log_level, json_logs=settings.log_json)

app = FastAPI(title="Menu Admin API", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_exception_handlers(app)
app.include_router(modules_router)
app.include_router(screens_router)
app.include_router(profiles_router)
app.include_router(menus_router)
app.include_router(menu_profiles_router)


@app.get("/api/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


__all__ = ["app"]
