# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from dataclasses import dataclass
from pydantic    import BaseModel

@dataclass
class Session:
    """Oturum açmış kullanıcı"""
    user_id  : int
    email    : str
    is_admin : bool
    token    : str = ""

    def to_dict(self) -> dict:
        return {"userId": self.user_id, "email": self.email, "isAdmin": self.is_admin}

class LoginIstegi(BaseModel):
    email: str = ""

class DavetOlusturIstegi(BaseModel):
    email: str | None = None

class DavetKabulIstegi(BaseModel):
    token: str = ""
    email: str = ""
