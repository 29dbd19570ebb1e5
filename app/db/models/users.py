"""
➡️ But : Table `users`.

Un utilisateur est créé à l'inscription puis seulement relu au login.
On ne stocke que le hash du mot de passe, jamais le clair.
"""

from sqlmodel import Field

from .base import BaseModelDB

class User(BaseModelDB, table=True):
    __tablename__ = "users"

    username: str = Field(index=True, unique=True, max_length=50)
    password_hash: str = Field(max_length=255)
