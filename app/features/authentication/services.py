import logging
from typing import Optional

from jose import JWTError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.core.errors import AuthError, ConflictError, ConnectivityError, ValidationError
from app.db.models.users import User
from app.db.repositories.tasks import TaskRepository
from app.db.repositories.user_tasks import UserTaskRepository
from app.db.repositories.users import UserRepository
from app.features.authentication.schemas import SessionOut
from app.features.users.schemas import UserOut
from app.security.password import hash_password
from app.security.tokens import JWTSettings, create_access_token, decode_token

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


class AuthService:
    """
    Service d'authentification : orchestre les repositories + tokens.
    Ne contient pas d'accès SQL direct et lève les erreurs de app.core.errors.

    - register : valide la saisie, crée l'utilisateur et ses user_tasks (une transaction)
    - login : retrouve l'utilisateur par (username, hash)
    - issue_session / get_current_user : support JWT pour l'API HTTP
    """

    def __init__(
        self,
        *,
        user_repo: UserRepository,
        task_repo: TaskRepository,
        user_task_repo: UserTaskRepository,
        jwt_settings: JWTSettings,
        password_min_length: int = 6,
    ):
        self.user_repo = user_repo
        self.task_repo = task_repo
        self.user_task_repo = user_task_repo
        self.jwt = jwt_settings
        self.password_min_length = password_min_length

    # ---------- Validation ----------
    def _validate_registration(self, username: str, password: str, confirm_password: Optional[str]) -> str:
        username = (username or "").strip()
        if not username or not (password or "").strip():
            raise ValidationError("Please fill in all fields")
        if confirm_password is not None:
            if not confirm_password.strip():
                raise ValidationError("Please fill in all fields")
            if password != confirm_password:
                raise ValidationError("Passwords do not match")
        if len(password) < self.password_min_length:
            raise ValidationError(f"Password must be at least {self.password_min_length} characters")
        return username

    def _username_taken(self, username: str) -> bool:
        try:
            return self.user_repo.get_by_username(username) is not None
        except SQLAlchemyError:
            return False

    # ---------- Register ----------
    def register(self, username: str, password: str, confirm_password: Optional[str] = None) -> UserOut:
        username = self._validate_registration(username, password, confirm_password)
        session = self.user_repo.session

        try:
            if self.user_repo.get_by_username(username):
                raise ConflictError("Username already exists")

            user = self.user_repo.create(
                commit=False,
                username=username,
                password_hash=hash_password(password),
            )
            # Fan-out : une instance par modèle, dans la même transaction
            templates = self.task_repo.list_ordered()
            self.user_task_repo.create_many(
                [{"user_id": user.id, "task_id": t.id, "completed": False} for t in templates],
                commit=False,
            )
            session.commit()
            session.refresh(user)
        except IntegrityError as e:
            session.rollback()
            # Course sur UNIQUE(username) si le nom existe maintenant ; sinon FK / autre contrainte
            if self._username_taken(username):
                raise ConflictError("Username already exists")
            logger.error("Registration failed for %r: %s", username, e)
            raise ConnectivityError("Registration failed, please try again")
        except SQLAlchemyError as e:
            session.rollback()
            logger.error("Registration failed for %r: %s", username, e)
            raise ConnectivityError("Registration failed, please try again")

        logger.info("Registered user %s with %d tasks", user.id, len(templates))
        return UserOut.model_validate(user)

    # ---------- Login ----------
    def login(self, username: str, password: str) -> UserOut:
        username = (username or "").strip()
        try:
            user = self.user_repo.get_by_credentials(username, hash_password(password or ""))
        except SQLAlchemyError as e:
            logger.error("Login query failed: %s", e)
            raise ConnectivityError("Login failed, please try again")

        if not user:
            # Ne pas révéler si l'utilisateur existe
            raise AuthError(INVALID_CREDENTIALS)
        return UserOut.model_validate(user)

    # ---------- Tokens (API) ----------
    def issue_session(self, user: UserOut) -> SessionOut:
        return SessionOut(
            user=user,
            access_token=create_access_token(user_id=user.id, username=user.username, settings=self.jwt),
            token_type="bearer",
            expires_in=int(self.jwt.access_ttl.total_seconds()),
        )

    def get_current_user(self, *, access_token: str) -> User:
        try:
            decoded = decode_token(access_token, self.jwt)
        except JWTError:
            raise AuthError("Invalid token")

        if decoded.get("typ") != "access":
            raise AuthError("Invalid token type")

        sub = decoded.get("sub")
        if not sub or not sub.isdigit():
            raise AuthError("Invalid token")

        try:
            user = self.user_repo.get(int(sub))
        except SQLAlchemyError as e:
            logger.error("User lookup failed: %s", e)
            raise ConnectivityError("Could not reach the database")
        if not user:
            raise AuthError("Invalid token")
        return user
