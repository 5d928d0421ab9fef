# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from fastapi                 import FastAPI, Request, Response, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from Core.Modules            import lifespan
from fastapi.responses       import JSONResponse, PlainTextResponse
from Settings                import PROJE

kekik_FastAPI = FastAPI(
    title       = PROJE,
    openapi_url = None,
    docs_url    = None,
    redoc_url   = None,
    lifespan    = lifespan
)

# ! ----------------------------------------» Middlewares

kekik_FastAPI.add_middleware(CORSMiddleware, allow_origins=["*"], allow_credentials=True, allow_methods=["*"], allow_headers=["*"])
kekik_FastAPI.add_middleware(GZipMiddleware, minimum_size=1000)

# ! ----------------------------------------» Routers

from Core.Modules          import _istek, _hata, _security
from Public.API.v1.Routers import api_v1_router
from Public.Auth.Routers   import auth_router
from Public.Sync.Routers   import sync_router
from Public.Media.Routers  import media_router

kekik_FastAPI.include_router(api_v1_router)
kekik_FastAPI.include_router(auth_router)
kekik_FastAPI.include_router(sync_router)
kekik_FastAPI.include_router(media_router)

@kekik_FastAPI.api_route("/api/{kalan:path}", methods=["GET", "POST", "PUT", "DELETE"])
async def api_bulunamadi(kalan: str):
    return JSONResponse(status_code=404, content={"error": "Not found"})
