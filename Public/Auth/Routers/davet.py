# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from fastapi  import Depends
from Core     import Request, JSONResponse
from .        import auth_router
from .oturum  import oturum_cerezi
from ..Libs   import admin_gerekli
from ..Models import Session, DavetOlusturIstegi, DavetKabulIstegi
from Settings import APP_BASE_URL

@auth_router.post("/invites/create")
async def davet_olustur(request: Request, istek: DavetOlusturIstegi, session: Session = Depends(admin_gerekli)):
    token = await request.app.state.auth_store.create_invite(istek.email, session.email)
    return {"token": token, "inviteUrl": f"{APP_BASE_URL}/invite/{token}"}

@auth_router.post("/invites/accept")
async def davet_kabul(request: Request, istek: DavetKabulIstegi):
    token, max_age = await request.app.state.auth_store.accept_invite(istek.token, istek.email)
    return oturum_cerezi(JSONResponse({"ok": True}), token, max_age)

@auth_router.get("/invites")
async def davetler(request: Request, session: Session = Depends(admin_gerekli)):
    return {"invites": await request.app.state.auth_store.list_invites()}
