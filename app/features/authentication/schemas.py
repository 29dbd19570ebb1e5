from typing import Optional

from pydantic import BaseModel

from app.features.users.schemas import UserOut

# ---------- Inputs ----------
# Pas de contraintes pydantic ici : les règles d'inscription vivent dans
# AuthService.register pour être partagées par l'API et l'AuthGate.

class RegisterIn(BaseModel):
    username: str
    password: str
    confirm_password: Optional[str] = None

class LoginIn(BaseModel):
    username: str
    password: str


# ---------- Outputs ----------

class SessionOut(BaseModel):
    user: UserOut
    access_token: str
    token_type: str = "bearer"
    expires_in: int  # secondes (durée de l'access token)
