# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from Core import Request, JSONResponse
from .    import api_v1_router

@api_v1_router.get("/health")
async def health_check(request: Request):
    """API sağlık kontrolü"""
    hub = request.app.state.sync_hub
    return JSONResponse({
        "success" : True,
        "status"  : "healthy",
        "rooms"   : {room_id: hub.registry.count(room_id) for room_id in hub.registry.rooms()},
    })
