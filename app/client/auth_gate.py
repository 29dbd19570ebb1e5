"""
➡️ But : Porte d'entrée de l'application côté client.

AuthGate établit l'identité (inscription / connexion), persiste le record
utilisateur localement et ne donne accès à la liste de tâches qu'à un
utilisateur présent.

Machine d'états : absent → (register | login) → present → (logout) → absent
"""

import logging
from typing import Callable, Optional

from app.core.errors import AuthError, ChecklistError
from app.client.session import LocalSessionStore, SessionContext, SessionStatus
from app.client.view_model import TaskListViewModel
from app.features.authentication.services import AuthService
from app.features.users.schemas import UserOut

logger = logging.getLogger(__name__)


class AuthGate:
    def __init__(
        self,
        *,
        auth_svc: AuthService,
        session_store: LocalSessionStore,
        view_model: TaskListViewModel,
    ):
        self.auth_svc = auth_svc
        self.session_store = session_store
        self.view_model = view_model
        self.context = SessionContext()

    # ---------- Entrée de page ----------
    def restore(self) -> SessionContext:
        self.context = SessionContext(status=SessionStatus.loading)
        user = self.session_store.read()
        self.context = SessionContext.present(user) if user else SessionContext()
        return self.context

    # ---------- Transitions ----------
    def _authenticate(self, call: Callable[[], UserOut]) -> UserOut:
        previous = self.context
        self.context = SessionContext(status=SessionStatus.loading)
        try:
            user = call()
            self.session_store.write(user)
        except ChecklistError:
            self.context = previous
            raise
        self.context = SessionContext.present(user)
        logger.info("User %s signed in", user.id)
        return user

    def register(self, username: str, password: str, confirm_password: Optional[str] = None) -> UserOut:
        return self._authenticate(lambda: self.auth_svc.register(username, password, confirm_password))

    def login(self, username: str, password: str) -> UserOut:
        return self._authenticate(lambda: self.auth_svc.login(username, password))

    def logout(self) -> None:
        self.session_store.clear()
        self.view_model.clear()
        self.context = SessionContext()

    # ---------- Accès protégé ----------
    def require_user(self) -> UserOut:
        if not self.context.is_authenticated:
            raise AuthError("Please log in first")
        return self.context.user  # type: ignore[return-value]

    def open_checklist(self) -> TaskListViewModel:
        """Charge la liste de l'utilisateur courant (AuthError si anonyme)."""
        user = self.require_user()
        self.view_model.load(user.id)
        return self.view_model
