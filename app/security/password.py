"""
➡️ But : Hacher les mots de passe de façon déterministe.

Le login retrouve l'utilisateur par (username, hash) : le hash doit donc être
stable pour un même mot de passe. On utilise un HMAC-SHA256 avec une clé
applicative (PASSWORD_PEPPER) plutôt qu'un hash nu.
"""

import hashlib
import hmac
from typing import Optional

from app.core.config import settings


def hash_password(password: str, *, pepper: Optional[str] = None) -> str:
    key = (pepper if pepper is not None else settings.PASSWORD_PEPPER).encode("utf-8")
    return hmac.new(key, password.encode("utf-8"), hashlib.sha256).hexdigest()