"""
➡️ But : Définir les formats de sortie d'un utilisateur (couche validation).

UserOut → réponse de l’API, et record de session persisté côté client.

Sépare le modèle "de stockage" (ORM) de celui "de transfert" (I/O API).

🔹 Avantages :

Empêche d’exposer par erreur des infos sensibles (ex: hash de mot de passe).
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    created_at: datetime
    updated_at: datetime
