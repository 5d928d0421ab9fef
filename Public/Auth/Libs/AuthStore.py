# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from __future__ import annotations
from CLI        import bilgi
from Libs       import VeriTabani, AuthError, ForbiddenError, SyncError
from ..Models   import Session
from datetime   import datetime, timedelta, timezone
import secrets

def _simdi() -> datetime:
    return datetime.now(timezone.utc)

def _iso(an: datetime) -> str:
    return an.isoformat(timespec="milliseconds").replace("+00:00", "Z")

def _coz(deger: str) -> datetime:
    return datetime.fromisoformat(deger.replace("Z", "+00:00"))

def rastgele_token(bayt: int = 24) -> str:
    return secrets.token_urlsafe(bayt)

class BadRequest(SyncError):
    status_code = 400

class NotFound(SyncError):
    status_code = 404

class AuthStore:
    """Kullanıcı, oturum ve davet kayıtları"""

    def __init__(self, db: VeriTabani, session_ttl_hours: int = 24 * 7):
        self.db          = db
        self.session_ttl = timedelta(hours=session_ttl_hours)

    # ============== Kullanıcılar ==============

    async def upsert_user(self, email: str, is_admin: bool, guncelle: bool = True) -> None:
        """Kullanıcıyı ekle; `guncelle` ise mevcut kullanıcının yetkisini de yaz"""
        catisma = "DO UPDATE SET is_admin = excluded.is_admin" if guncelle else "DO NOTHING"
        await self.db.yaz(
            f"""
            INSERT INTO users (email, is_admin, created_at) VALUES (?, ?, ?)
            ON CONFLICT(email) {catisma}
            """,
            (email, int(is_admin), _iso(_simdi())),
        )

    async def seed_users(self, admin_emails: list[str], test_users: list[str], production: bool) -> list[str]:
        """Başlangıçta davetli kullanıcıları oluştur"""
        kullanicilar = list(test_users)
        if not production and not kullanicilar:
            kullanicilar = ["admin@example.com", "user1@example.com", "user2@example.com"]

        eklenenler = []
        for email in [*kullanicilar, *admin_emails]:
            email = email.strip().lower()
            if email and email not in eklenenler:
                await self.upsert_user(email, True)
                eklenenler.append(email)

        bilgi(f"[green]auth:seed[/] {len(eklenenler)} kullanıcı")
        return eklenenler

    async def _user_id(self, email: str) -> int | None:
        row = await self.db.oku_bir("SELECT id FROM users WHERE email = ?", (email,))
        return row["id"] if row else None

    # ============== Oturumlar ==============

    async def open_session(self, user_id: int) -> tuple[str, int]:
        token   = rastgele_token(32)
        expires = _simdi() + self.session_ttl
        await self.db.yaz(
            "INSERT INTO sessions (user_id, token, expires_at, created_at) VALUES (?, ?, ?, ?)",
            (user_id, token, _iso(expires), _iso(_simdi())),
        )
        return token, int(self.session_ttl.total_seconds())

    async def get_session(self, token: str | None) -> Session | None:
        if not token:
            return None

        row = await self.db.oku_bir(
            """
            SELECT sessions.token, sessions.expires_at, users.id AS user_id, users.email, users.is_admin
              FROM sessions JOIN users ON users.id = sessions.user_id
             WHERE sessions.token = ?
            """,
            (token,),
        )
        if not row:
            return None

        if _coz(row["expires_at"]) < _simdi():
            await self.db.yaz("DELETE FROM sessions WHERE token = ?", (token,))
            return None

        return Session(user_id=row["user_id"], email=row["email"], is_admin=row["is_admin"] == 1, token=row["token"])

    async def login(self, email: str) -> tuple[str, int]:
        """Davetli e-posta ile oturum aç; (token, max_age) döndürür"""
        email = (email or "").strip().lower()
        if not email:
            raise BadRequest("Email required")

        user_id = await self._user_id(email)
        if user_id is None:
            raise ForbiddenError("Email not invited")
        return await self.open_session(user_id)

    async def logout(self, session: Session | None) -> None:
        if session:
            await self.db.yaz("DELETE FROM sessions WHERE user_id = ?", (session.user_id,))

    # ============== Davetler ==============

    async def create_invite(self, email: str | None, created_by: str) -> str:
        email = (email or "").strip().lower()
        if not email:
            raise BadRequest("Email required")

        token = rastgele_token(24)
        await self.db.yaz(
            """
            INSERT INTO invites (token, email, uses_remaining, expires_at, created_by, created_at)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (token, email, 1, None, created_by, _iso(_simdi())),
        )
        return token

    async def accept_invite(self, token: str, email: str) -> tuple[str, int]:
        token = (token or "").strip()
        email = (email or "").strip().lower()
        if not token or not email:
            raise BadRequest("Token and email required")

        invite = await self.db.oku_bir(
            "SELECT id, email, uses_remaining, expires_at FROM invites WHERE token = ?",
            (token,),
        )
        if not invite:
            raise NotFound("Invalid invite")
        if invite["email"] and invite["email"] != email:
            raise ForbiddenError("Invite is for a different email")
        if invite["expires_at"] and _coz(invite["expires_at"]) < _simdi():
            raise ForbiddenError("Invite expired")
        if invite["uses_remaining"] <= 0:
            raise ForbiddenError("Invite used up")

        # Davetliler üye olarak eklenir; mevcut yönetici yetkisi korunur
        await self.upsert_user(email, False, guncelle=False)
        await self.db.yaz("UPDATE invites SET uses_remaining = uses_remaining - 1 WHERE id = ?", (invite["id"],))

        user_id = await self._user_id(email)
        if user_id is None:
            raise AuthError("Email not invited")

        return await self.open_session(user_id)

    async def list_invites(self) -> list[dict]:
        rows = await self.db.oku_hepsi(
            "SELECT token, email, uses_remaining, expires_at, created_by, created_at FROM invites ORDER BY created_at DESC"
        )
        return [dict(row) for row in rows]
