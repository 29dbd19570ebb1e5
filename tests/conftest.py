# tests/conftest.py

from __future__ import annotations

import os

# Avant tout import de app.* : config de test (base mémoire, pas d'echo SQL)
os.environ["ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_LEVEL"] = "WARNING"

from pathlib import Path

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session

from app.db.repositories.tasks import TaskRepository
from app.db.repositories.user_tasks import UserTaskRepository
from app.db.repositories.users import UserRepository
from app.db.seed import load_seed_yaml, seed_tasks
from app.db.session import build_engine, init_db
from app.features.authentication.services import AuthService
from app.features.checklist.services import ChecklistService
from app.security.tokens import JWTSettings

SEED_PATH = Path(__file__).resolve().parents[1] / "app" / "db" / "seed_data.yaml"


@pytest.fixture()
def engine():
    """Une base SQLite mémoire par test, partagée entre connexions (StaticPool)."""
    engine = build_engine("sqlite://", poolclass=StaticPool)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session(engine):
    with Session(engine) as s:
        yield s


@pytest.fixture()
def seeded(session: Session) -> int:
    """Insère les modèles du YAML et retourne leur nombre."""
    return seed_tasks(session, load_seed_yaml(SEED_PATH))


@pytest.fixture()
def jwt() -> JWTSettings:
    return JWTSettings(secret="test-secret", issuer="task-checklist-tests")


@pytest.fixture()
def auth_svc(session: Session, jwt: JWTSettings) -> AuthService:
    return AuthService(
        user_repo=UserRepository(session),
        task_repo=TaskRepository(session),
        user_task_repo=UserTaskRepository(session),
        jwt_settings=jwt,
        password_min_length=6,
    )


@pytest.fixture()
def checklist_svc(session: Session) -> ChecklistService:
    return ChecklistService(user_task_repo=UserTaskRepository(session))
