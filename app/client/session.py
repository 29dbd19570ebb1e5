"""
➡️ But : Représenter la session côté client.

SessionContext : contexte explicite {absent, loading, present(User)} passé aux
composants qui exigent une authentification.

LocalSessionStore : le record utilisateur sérialisé en JSON sous une clé connue
(équivalent du stockage local du navigateur), relu à chaque entrée de page.

🔹 Un record absent ou illisible signifie "non connecté", jamais une erreur.
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from app.core.errors import ConnectivityError
from app.features.users.schemas import UserOut

logger = logging.getLogger(__name__)


class SessionStatus(str, Enum):
    absent = "absent"
    loading = "loading"
    present = "present"


@dataclass(frozen=True)
class SessionContext:
    status: SessionStatus = SessionStatus.absent
    user: Optional[UserOut] = None

    @property
    def is_authenticated(self) -> bool:
        return self.status == SessionStatus.present and self.user is not None

    @classmethod
    def present(cls, user: UserOut) -> "SessionContext":
        return cls(status=SessionStatus.present, user=user)


class LocalSessionStore:
    KEY = "user"

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def read(self) -> Optional[UserOut]:
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return UserOut.model_validate(data[self.KEY])
        except (OSError, ValueError, KeyError, TypeError) as e:
            # ValueError couvre JSONDecodeError et pydantic.ValidationError
            logger.warning("Ignoring unreadable session record %s: %s", self.path, e)
            return None

    def write(self, user: UserOut) -> None:
        payload = {self.KEY: user.model_dump(mode="json")}
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(payload), encoding="utf-8")
        except OSError as e:
            logger.error("Could not write session record %s: %s", self.path, e)
            raise ConnectivityError("Could not save your session locally")

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
