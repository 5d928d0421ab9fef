# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from CLI               import debug, uyari
from fastapi           import Response
from fastapi.responses import FileResponse
from .                 import media_router
from ..Libs            import guvenli_yol
from Settings          import VIDEO_DIR

@media_router.get("/subs/{altyazi_yolu:path}")
async def subs(altyazi_yolu: str):
    dosya = guvenli_yol(VIDEO_DIR, altyazi_yolu)

    if not dosya.is_file():
        uyari(f"subs:not_found {dosya}")
        return Response("Not found", status_code=404)

    debug(f"subs:serve {dosya}")
    return FileResponse(dosya, media_type="text/vtt")
