# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from CLI              import bilgi
from fastapi          import Depends
from Core             import JSONResponse
from .                import media_router
from ..Libs           import video_dosyalari, altyazi_izleri
from Public.Auth.Libs import oturum_gerekli
from Settings         import VIDEO_DIR
import asyncio

@media_router.get("/api/videos", dependencies=[Depends(oturum_gerekli)])
async def videos():
    files = await asyncio.to_thread(video_dosyalari, VIDEO_DIR)
    bilgi(f"api:videos {len(files)}")
    return {"files": files}

@media_router.get("/api/subtitles", dependencies=[Depends(oturum_gerekli)])
async def subtitles(video: str | None = None):
    if not video:
        return JSONResponse({"error": "Video required"}, status_code=400)

    sonuc = await asyncio.to_thread(altyazi_izleri, VIDEO_DIR, video)
    bilgi(f"api:subtitles {video} {len(sonuc['tracks'])} {[iz['label'] for iz in sonuc['tracks']]}")
    return {"tracks": sonuc["tracks"]}
