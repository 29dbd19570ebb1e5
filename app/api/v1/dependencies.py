"""
➡️ But : Centraliser les dépendances réutilisables des routes.

Exemples :

get_auth_service() : crée un AuthService à partir d’une session DB.

get_current_user() : résout l'utilisateur depuis le header Authorization: Bearer.

🔹 Avantages :

Routes plus propres (pas de code dupliqué).

Facile à injecter dans plusieurs endpoints (Depends()).
"""

from fastapi import Depends, HTTPException, status, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlmodel import Session

from app.core.config import settings, jwt_settings
from app.core.errors import AuthError, ConnectivityError
from app.db.models.users import User
from app.db.session import get_session

from app.db.repositories.users import UserRepository
from app.db.repositories.tasks import TaskRepository
from app.db.repositories.user_tasks import UserTaskRepository

from app.features.authentication.services import AuthService
from app.features.checklist.services import ChecklistService


# -----------------------------
# Repositories
# -----------------------------
def get_user_repository(session: Session = Depends(get_session)) -> UserRepository:
    return UserRepository(session)

def get_task_repository(session: Session = Depends(get_session)) -> TaskRepository:
    return TaskRepository(session)

def get_user_task_repository(session: Session = Depends(get_session)) -> UserTaskRepository:
    return UserTaskRepository(session)


# -----------------------------
# Auth
# -----------------------------
def get_auth_service(
    user_repo: UserRepository = Depends(get_user_repository),
    task_repo: TaskRepository = Depends(get_task_repository),
    user_task_repo: UserTaskRepository = Depends(get_user_task_repository),
) -> AuthService:
    return AuthService(
        user_repo=user_repo,
        task_repo=task_repo,
        user_task_repo=user_task_repo,
        jwt_settings=jwt_settings,
        password_min_length=settings.PASSWORD_MIN_LENGTH,
    )


# -----------------------------
# Checklist
# -----------------------------
def get_checklist_service(
    user_task_repo: UserTaskRepository = Depends(get_user_task_repository),
) -> ChecklistService:
    return ChecklistService(user_task_repo=user_task_repo)


# -----------------------------
# Authentication data
# -----------------------------
bearer_scheme = HTTPBearer(auto_error=True)

def get_access_token_from_bearer(
    credentials: HTTPAuthorizationCredentials = Security(bearer_scheme),
) -> str:
    if not credentials or credentials.scheme.lower() != "bearer":
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid auth scheme")
    return credentials.credentials


def get_current_user(
    access_token: str = Depends(get_access_token_from_bearer),
    svc: AuthService = Depends(get_auth_service),
) -> User:
    try:
        return svc.get_current_user(access_token=access_token)
    except AuthError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)
    except ConnectivityError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=e.message)
