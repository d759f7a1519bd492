"""SQLite-backed storage for resumes, workspace state and app settings."""

from __future__ import annotations

import json
import logging
import sqlite3
from datetime import datetime
from pathlib import Path

from resume_builder.models.resume import Resume, ResumeData
from resume_builder.models.settings import AppSettings
from resume_builder.store.workspace import ResumeWorkspace

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path.home() / ".resume-builder" / "resumes.db"


class ResumeStore:
    """Persists resumes and settings across runs, one connection per operation."""

    def __init__(self, db_path: str | Path = DEFAULT_DB_PATH):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self.db_path))
        conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _init_db(self) -> None:
        with self._connect() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS resumes (
                    id TEXT PRIMARY KEY,
                    name TEXT NOT NULL,
                    data_json TEXT NOT NULL,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)
            conn.execute("""
                CREATE TABLE IF NOT EXISTS workspace_state (
                    key TEXT PRIMARY KEY,
                    value TEXT
                )
            """)
            conn.execute("""
                CREATE TABLE IF NOT EXISTS app_settings (
                    id INTEGER PRIMARY KEY CHECK (id = 1),
                    settings_json TEXT NOT NULL
                )
            """)

    # -- single resumes -------------------------------------------------------

    def put(self, resume: Resume) -> None:
        """Insert or replace a resume."""
        with self._connect() as conn:
            self._write_resume(conn, resume)

    @staticmethod
    def _write_resume(conn: sqlite3.Connection, resume: Resume) -> None:
        conn.execute(
            """INSERT OR REPLACE INTO resumes
               (id, name, data_json, created_at, updated_at)
               VALUES (?, ?, ?, ?, ?)""",
            (
                resume.id,
                resume.name,
                resume.data.model_dump_json(by_alias=True),
                resume.created_at.isoformat(),
                resume.updated_at.isoformat(),
            ),
        )

    @staticmethod
    def _row_to_resume(row: tuple) -> Resume:
        resume_id, name, data_json, created_at, updated_at = row
        return Resume(
            id=resume_id,
            name=name,
            data=ResumeData.model_validate_json(data_json),
            created_at=datetime.fromisoformat(created_at),
            updated_at=datetime.fromisoformat(updated_at),
        )

    def get(self, resume_id: str) -> Resume | None:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT id, name, data_json, created_at, updated_at FROM resumes WHERE id = ?",
                (resume_id,),
            ).fetchone()
        return self._row_to_resume(row) if row else None

    def delete(self, resume_id: str) -> None:
        with self._connect() as conn:
            conn.execute("DELETE FROM resumes WHERE id = ?", (resume_id,))

    def list_resumes(self) -> list[Resume]:
        """All stored resumes, oldest first."""
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT id, name, data_json, created_at, updated_at FROM resumes ORDER BY created_at"
            ).fetchall()
        return [self._row_to_resume(row) for row in rows]

    # -- workspace ------------------------------------------------------------

    def save_workspace(self, workspace: ResumeWorkspace) -> None:
        """Replace the stored resumes and workspace state with ``workspace``."""
        resumes = workspace.resumes
        with self._connect() as conn:
            stored_ids = {row[0] for row in conn.execute("SELECT id FROM resumes")}
            for stale_id in stored_ids - resumes.keys():
                conn.execute("DELETE FROM resumes WHERE id = ?", (stale_id,))
            for resume in resumes.values():
                self._write_resume(conn, resume)
            conn.executemany(
                "INSERT OR REPLACE INTO workspace_state (key, value) VALUES (?, ?)",
                [
                    ("active_resume_id", workspace.active_resume_id),
                    ("next_id", str(workspace.next_id)),
                ],
            )
        logger.debug("Saved %d resumes to %s", len(resumes), self.db_path)

    def load_workspace(self, **kwargs) -> ResumeWorkspace:
        """Build a workspace from stored state; extra kwargs go to ``ResumeWorkspace``."""
        with self._connect() as conn:
            state = dict(conn.execute("SELECT key, value FROM workspace_state").fetchall())
        resumes = {resume.id: resume for resume in self.list_resumes()}
        return ResumeWorkspace(
            resumes=resumes,
            active_resume_id=state.get("active_resume_id"),
            next_id=int(state.get("next_id") or len(resumes) + 1),
            **kwargs,
        )

    # -- settings -------------------------------------------------------------

    def get_settings(self) -> AppSettings:
        with self._connect() as conn:
            row = conn.execute("SELECT settings_json FROM app_settings WHERE id = 1").fetchone()
        if row is None:
            return AppSettings()
        return AppSettings.model_validate(json.loads(row[0]))

    def put_settings(self, settings: AppSettings) -> None:
        with self._connect() as conn:
            conn.execute(
                "INSERT OR REPLACE INTO app_settings (id, settings_json) VALUES (1, ?)",
                (settings.model_dump_json(by_alias=True),),
            )
