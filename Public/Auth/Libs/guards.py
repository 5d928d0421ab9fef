# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from fastapi            import Request, WebSocket
from starlette.requests import HTTPConnection
from Libs               import AuthError, ForbiddenError
from Settings           import SESSION_COOKIE
from ..Models           import Session

async def oturum_getir(conn: HTTPConnection) -> Session | None:
    """Çerezdeki oturumu çöz (HTTP ve WebSocket için ortak)"""
    auth_store = conn.app.state.auth_store
    return await auth_store.get_session(conn.cookies.get(SESSION_COOKIE))

async def oturum_gerekli(request: Request) -> Session:
    session = await oturum_getir(request)
    if not session:
        raise AuthError()
    return session

async def admin_gerekli(request: Request) -> Session:
    session = await oturum_gerekli(request)
    if not session.is_admin:
        raise ForbiddenError()
    return session

async def websocket_oturumu(websocket: WebSocket) -> Session | None:
    return await oturum_getir(websocket)
