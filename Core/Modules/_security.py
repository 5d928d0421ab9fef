# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from Core import kekik_FastAPI, Request

@kekik_FastAPI.middleware("http")
async def add_security_headers(request: Request, call_next):
    response = await call_next(request)

    # --- Temel Güvenlik Başlıkları ---
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"]        = "SAMEORIGIN"
    response.headers["Referrer-Policy"]        = "strict-origin-when-cross-origin"

    # --- Modern Tarayıcı / İzolasyon Politikaları ---
    response.headers["Cross-Origin-Opener-Policy"]   = "same-origin"
    response.headers["Cross-Origin-Resource-Policy"] = "same-origin"

    # Medya ve API yanıtları önbelleğe alınmasın
    if request.url.path.startswith(("/api", "/subs")):
        response.headers["Cache-Control"] = "no-store"
        response.headers["X-Robots-Tag"]  = "noindex, nofollow"

    # --- Gereksiz Bilgi Sızmalarını Temizle ---
    for header in ("server", "x-powered-by"):
        if header in response.headers:
            del response.headers[header]

    return response
