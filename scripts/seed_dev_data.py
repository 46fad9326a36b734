"""Seed dev data: a few users and tasks with due dates around today.

Users are provisioned through UserService (null directory, so names come
from the seed hints) and tasks through TaskService, so assignment
notifications are created as they would be by the API.

Usage:
    python -m scripts.seed_dev_data [path/to/seed-data.json]

The JSON file, when given, has the shape
{"users": [{"externalId", "name", "email"}],
 "tasks": [{"title", "createdBy", "assignedTo", "dueInDays", "status"}]}.
Requires: DATABASE_URL (Postgres) with migrations applied (alembic upgrade head).
"""

from __future__ import annotations

import asyncio
import json
import sys
from datetime import timedelta
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from app.application.dtos.task import CreateTaskCommand
from app.application.dtos.user import DirectoryUser
from app.application.services import NotificationService, TaskService, UserService
from app.domain.enums import TaskStatus
from app.infrastructure.external.directory import NullUserDirectory
from app.infrastructure.messaging import LogOnlyNotificationPublisher
from app.infrastructure.persistence import database
from app.infrastructure.persistence.repositories import (
    NotificationRepository,
    TaskRepository,
    UserRepository,
)
from app.shared.telemetry.logging import get_logger, setup_logging
from app.shared.utils.datetime import utc_today

logger = get_logger("scripts.seed_dev_data")

DEFAULT_SEED: dict[str, Any] = {
    "users": [
        {"externalId": "dev-alice", "name": "Alice Dev", "email": "alice@example.com"},
        {"externalId": "dev-bob", "name": "Bob Dev", "email": "bob@example.com"},
    ],
    "tasks": [
        {"title": "Prepare sprint demo", "createdBy": "dev-alice", "dueInDays": 0},
        {
            "title": "Review pull requests",
            "createdBy": "dev-alice",
            "assignedTo": "dev-bob",
            "dueInDays": 2,
            "status": "InProgress",
        },
        {"title": "Write release notes", "createdBy": "dev-bob", "dueInDays": 12},
        {"title": "Clean up backlog", "createdBy": "dev-bob", "assignedTo": "dev-alice"},
        {"title": "Renew certificates", "createdBy": "dev-alice", "dueInDays": -3},
    ],
}


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


def _load_seed(argv: list[str]) -> dict[str, Any]:
    if len(argv) > 1:
        return json.loads(Path(argv[1]).read_text(encoding="utf-8"))
    return DEFAULT_SEED


async def seed(data: dict[str, Any]) -> None:
    session_factory = database._ensure_engine()
    async with session_factory() as session, session.begin():
        users = UserService(UserRepository(session), NullUserDirectory())
        notifications = NotificationService(
            NotificationRepository(session), users, LogOnlyNotificationPublisher()
        )
        tasks = TaskService(TaskRepository(session), users, notifications)

        for entry in data.get("users", []):
            result = await users.provision_current_user(
                entry["externalId"],
                DirectoryUser(name=entry.get("name", ""), email=entry.get("email", "")),
            )
            logger.info(
                "User %s %s", entry["externalId"], "created" if result.created else "exists"
            )

        today = utc_today()
        for entry in data.get("tasks", []):
            due_in = entry.get("dueInDays")
            detail = await tasks.create(
                entry["createdBy"],
                CreateTaskCommand(
                    title=entry["title"],
                    description=entry.get("description"),
                    due_date=today + timedelta(days=due_in) if due_in is not None else None,
                    assigned_to_external_id=entry.get("assignedTo"),
                ),
            )
            status = TaskStatus(entry.get("status", TaskStatus.PENDING.value))
            if status is not TaskStatus.PENDING:
                await tasks.update_status(entry["createdBy"], detail.id, status)
            logger.info("Task %s: %s", detail.id, entry["title"])
    await database.dispose_engine()


def main() -> None:
    _load_env()
    setup_logging()
    asyncio.run(seed(_load_seed(sys.argv)))


if __name__ == "__main__":
    main()
