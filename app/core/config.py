"""
➡️ But : Centraliser tous les paramètres configurables (nom d’app, chemin DB, secrets, session locale…)

Utilise pydantic-settings pour charger automatiquement les variables d’environnement (.env, variables système…).

Fournit un objet settings unique, que tu importes ailleurs :

from app.core.config import settings
print(settings.APP_NAME)


🔹 Avantages :

Plus propre que des constantes éparpillées dans le code.

Facilite le passage entre environnements (dev / prod / test).
"""

from datetime import timedelta
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings
from app.security.tokens import JWTSettings


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "Task-Checklist"
    ENV: str = "dev"  # dev | prod | test
    LOG_LEVEL: str = "INFO"

    # -----------------------------
    # DB
    # -----------------------------
    SQLITE_PATH: str = "checklist.db"  # fichier SQLite
    # Pour une autre base (ex: Postgres), définir DATABASE_URL dans l'env.
    DATABASE_URL: Optional[str] = None
    # YAML livré avec le package app.db, indépendant du répertoire courant
    SEED_PATH: str = str(Path(__file__).resolve().parents[1] / "db" / "seed_data.yaml")

    # -----------------------------
    # Auth
    # -----------------------------
    JWT_SECRET_KEY: str = "CHANGE_ME"     # ⚠️ change en prod
    JWT_ISSUER: str = "task-checklist"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TTL_MINUTES: int = 60 * 24

    PASSWORD_PEPPER: str = "CHANGE_ME_TOO"  # clé HMAC du hash de mot de passe
    PASSWORD_MIN_LENGTH: int = 6

    # -----------------------------
    # Session locale (client)
    # -----------------------------
    SESSION_FILE: Optional[str] = None  # auto si None

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }

    # -----------------------------
    # Post-process values
    # -----------------------------
    def model_post_init(self, __context): # appelée automatiquement
        # DATABASE_URL par défaut depuis SQLITE_PATH si non fourni
        if not self.DATABASE_URL:
            object.__setattr__(self, "DATABASE_URL", f"sqlite:///{self.SQLITE_PATH}")

        # Le record de session vit à côté de la base par défaut
        if not self.SESSION_FILE:
            object.__setattr__(self, "SESSION_FILE", ".local/session.json")


# Instance globale importable partout
settings = Settings()

# Objet JWT prêt à l'emploi pour les services
jwt_settings = JWTSettings(
    secret=settings.JWT_SECRET_KEY,
    issuer=settings.JWT_ISSUER,
    algorithm=settings.JWT_ALGORITHM,
    access_ttl=timedelta(minutes=settings.ACCESS_TTL_MINUTES),
)
