"""
➡️ But : Point de composition du client.

Assemble repositories → services → view-model → AuthGate à partir d'une
session DB, et relit la session locale comme à l'ouverture de la page.
"""

from typing import Optional, Union
from pathlib import Path

from sqlmodel import Session

from app.core.config import settings, jwt_settings
from app.client.auth_gate import AuthGate
from app.client.session import LocalSessionStore
from app.client.view_model import TaskListViewModel
from app.db.repositories.tasks import TaskRepository
from app.db.repositories.user_tasks import UserTaskRepository
from app.db.repositories.users import UserRepository
from app.features.authentication.services import AuthService
from app.features.checklist.services import ChecklistService


def create_auth_gate(session: Session, *, session_file: Optional[Union[str, Path]] = None) -> AuthGate:
    user_task_repo = UserTaskRepository(session)
    auth_svc = AuthService(
        user_repo=UserRepository(session),
        task_repo=TaskRepository(session),
        user_task_repo=user_task_repo,
        jwt_settings=jwt_settings,
        password_min_length=settings.PASSWORD_MIN_LENGTH,
    )
    gate = AuthGate(
        auth_svc=auth_svc,
        session_store=LocalSessionStore(session_file or settings.SESSION_FILE),
        view_model=TaskListViewModel(ChecklistService(user_task_repo=user_task_repo)),
    )
    gate.restore()
    return gate
