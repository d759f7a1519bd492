"""Remote settings endpoint: returns the signed-in user's saved builder settings."""

from __future__ import annotations

import json
import logging
import os
import sqlite3
from pathlib import Path
from typing import Any

import jwt
from fastapi import Depends, FastAPI, HTTPException, Request

from resume_builder.config import SettingsServiceConfig

logger = logging.getLogger(__name__)

DEFAULT_JWT_SECRET = "your-secret-key-change-in-production"


class SettingsDatabase:
    """Read access to the ``user_settings`` table."""

    def __init__(self, db_path: str | Path):
        self.db_path = Path(db_path)

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        return conn

    def init_schema(self) -> None:
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        with self._connect() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS user_settings (
                    id TEXT PRIMARY KEY,
                    user_id TEXT NOT NULL UNIQUE,
                    settings TEXT NOT NULL,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)

    def get_user_settings(self, user_id: str) -> dict[str, Any] | None:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT * FROM user_settings WHERE user_id = ?", (user_id,)
            ).fetchone()
        return dict(row) if row else None


def resolve_secret(config: SettingsServiceConfig) -> str:
    return config.jwt_secret or os.environ.get("JWT_SECRET") or DEFAULT_JWT_SECRET


def extract_token(request: Request, cookie_name: str) -> str | None:
    token = request.cookies.get(cookie_name)
    if token:
        return token
    scheme, _, credentials = request.headers.get("authorization", "").partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return None


def decode_settings(payload: Any) -> Any:
    if isinstance(payload, str):
        return json.loads(payload)
    return payload


def create_app(config: SettingsServiceConfig | None = None) -> FastAPI:
    config = config or SettingsServiceConfig()
    secret = resolve_secret(config)
    db_path = config.resolved_settings_db_path
    database = SettingsDatabase(db_path) if db_path else None
    if database is not None:
        database.init_schema()

    app = FastAPI(
        title="Resume Builder Settings",
        version="1.0",
        description="Per-user settings for the resume builder.",
    )
    app.state.settings_db = database

    def current_user_id(request: Request) -> str:
        token = extract_token(request, config.cookie_name)
        if not token:
            raise HTTPException(status_code=401, detail="Authentication required")
        try:
            payload = jwt.decode(token, secret, algorithms=[config.algorithm])
        except jwt.InvalidTokenError as e:
            logger.debug("Rejected token: %s", e)
            raise HTTPException(status_code=401, detail="Invalid token") from e
        user_id = payload.get("sub")
        if not user_id:
            raise HTTPException(status_code=401, detail="Invalid token")
        return str(user_id)

    @app.get("/api/settings")
    def get_settings(user_id: str = Depends(current_user_id)) -> dict[str, Any]:
        db: SettingsDatabase | None = app.state.settings_db
        if db is None:
            return {"settings": {}}
        row = db.get_user_settings(user_id)
        if row is None:
            return {"settings": {}}
        return {"settings": decode_settings(row["settings"])}

    return app
