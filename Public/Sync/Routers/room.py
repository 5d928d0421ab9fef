# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from fastapi            import Depends
from pydantic           import BaseModel
from Core               import Request
from .                  import sync_router
from Public.Auth.Libs   import oturum_gerekli, admin_gerekli
from Public.Auth.Models import Session

class VideoSecimi(BaseModel):
    roomId    : str | None = None
    videoPath : str | None = None

@sync_router.get("/api/room/state")
async def room_state(request: Request, room: str = "main", session: Session = Depends(oturum_gerekli)):
    """Odanın güncel durumu (WebSocket `state` verisiyle aynı şekil)"""
    hub   = request.app.state.sync_hub
    state = await hub.get_state(room or "main")
    return hub.snapshot(state)

@sync_router.post("/api/room/set-video")
async def set_video(request: Request, secim: VideoSecimi, session: Session = Depends(admin_gerekli)):
    """Yönetici: odanın videosunu değiştir (konum sıfırlanır, durdurulur)"""
    hub = request.app.state.sync_hub
    await hub.set_video(secim.roomId or "main", secim.videoPath or None)
    return {"ok": True}
