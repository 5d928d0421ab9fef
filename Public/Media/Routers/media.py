# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from CLI               import debug, uyari
from fastapi           import Request, Response
from fastapi.responses import StreamingResponse
from .                 import media_router
from ..Libs            import guvenli_yol, aralik_coz, dosya_parcasi
from Libs              import InvalidPathError
from Settings          import VIDEO_DIR
import mimetypes

@media_router.get("/media/{video_yolu:path}")
async def media(request: Request, video_yolu: str):
    """Video dosyası; tek aralıklı Range isteklerini destekler"""
    try:
        dosya = guvenli_yol(VIDEO_DIR, video_yolu)
    except InvalidPathError:
        uyari(f"media:invalid_path {video_yolu}")
        raise

    if not dosya.is_file():
        uyari(f"media:not_found {dosya}")
        return Response("Not found", status_code=404)

    boyut      = dosya.stat().st_size
    media_type = mimetypes.guess_type(dosya.name)[0] or "application/octet-stream"

    aralik = request.headers.get("range")
    if not aralik:
        debug(f"media:full {dosya} {boyut}")
        return StreamingResponse(
            dosya_parcasi(dosya, 0, boyut - 1),
            media_type = media_type,
            headers    = {"Accept-Ranges": "bytes", "Content-Length": str(boyut), "Content-Encoding": "identity"},
        )

    start, end = aralik_coz(aralik, boyut)
    debug(f"media:range {dosya} {start}-{end}")

    return StreamingResponse(
        dosya_parcasi(dosya, start, end),
        status_code = 206,
        media_type  = media_type,
        headers     = {
            "Content-Length"   : str(end - start + 1),
            "Content-Range"    : f"bytes {start}-{end}/{boyut}",
            "Accept-Ranges"    : "bytes",
            # GZip katmanı bayt aralıklarını bozmasın
            "Content-Encoding" : "identity",
        },
    )
