"""Runtime entrypoint that layers custom behaviour on the generated FastAPI app."""

from __future__ import annotations

from fastapi.middleware.cors import CORSMiddleware

from catalog_api import main as generated_main
from catalog_api.config.settings import get_api_settings
from catalog_api.db.migrations import upgrade_database

app = generated_main.app

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_api_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def _startup() -> None:
    upgrade_database()
