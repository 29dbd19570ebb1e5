"""
➡️ But : Taxonomie des erreurs métier.

Les services lèvent ces exceptions (jamais d'HTTPException) ; chaque appelant
les rattrape là où il les affiche :

- routers FastAPI → HTTPException (422 / 409 / 401 / 503 / 404)
- AuthGate / TaskListViewModel → message inline ou bannière

Aucune n'est fatale, aucune n'est rejouée automatiquement.
"""


class ChecklistError(Exception):
    """Base commune : `message` est le texte affichable tel quel."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ChecklistError):
    """Saisie d'inscription invalide (champ vide, mot de passe trop court…)."""


class ConflictError(ChecklistError):
    """Nom d'utilisateur déjà pris, ou opération impossible sur l'élément."""


class AuthError(ChecklistError):
    """Identifiants invalides ou session absente. Volontairement peu bavard."""


class ConnectivityError(ChecklistError):
    """Base injoignable ou requête en échec."""


class NotFoundError(ChecklistError):
    """Élément inconnu ou appartenant à un autre utilisateur."""
