# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from Core     import Request, JSONResponse
from .        import auth_router
from ..Libs   import oturum_getir
from ..Models import LoginIstegi
from Settings import SESSION_COOKIE, PRODUCTION

def oturum_cerezi(response: JSONResponse, token: str, max_age: int) -> JSONResponse:
    response.set_cookie(
        key      = SESSION_COOKIE,
        value    = token,
        path     = "/",
        httponly = True,
        samesite = "lax",
        secure   = PRODUCTION,
        max_age  = max_age,
    )
    return response

@auth_router.get("/me")
async def me(request: Request):
    session = await oturum_getir(request)
    return {"user": session.to_dict() if session else None}

@auth_router.post("/auth/login")
async def login(request: Request, istek: LoginIstegi):
    token, max_age = await request.app.state.auth_store.login(istek.email)
    return oturum_cerezi(JSONResponse({"ok": True}), token, max_age)

@auth_router.post("/auth/logout")
async def logout(request: Request):
    session = await oturum_getir(request)
    await request.app.state.auth_store.logout(session)

    response = JSONResponse({"ok": True})
    response.delete_cookie(SESSION_COOKIE, path="/")
    return response
