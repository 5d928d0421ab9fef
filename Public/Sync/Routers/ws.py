# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from CLI              import konsol, hata
from fastapi          import WebSocket, WebSocketDisconnect, status
from .                import sync_router
from ..Libs           import parse_client_message
from Libs             import StoreError
from Public.Auth.Libs import websocket_oturumu

MAX_PAYLOAD = 64 * 1024  # 64 KB

@sync_router.websocket("/ws")
async def sync_websocket(websocket: WebSocket, room: str = "main"):
    session = await websocket_oturumu(websocket)
    if not session:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    await websocket.accept()

    room_id = room or "main"
    hub     = websocket.app.state.sync_hub

    try:
        await hub.on_channel_open(room_id, websocket)
    except StoreError as exc:
        hata(f"ws:open_failed {room_id} » {exc.message}")
        await websocket.close(code=status.WS_1011_INTERNAL_ERROR)
        return

    try:
        while True:
            mesaj = await websocket.receive()
            if mesaj["type"] == "websocket.disconnect":
                break

            raw = mesaj.get("text") or mesaj.get("bytes")
            if not raw:
                continue

            boyut = len(raw.encode("utf-8")) if isinstance(raw, str) else len(raw)
            if boyut > MAX_PAYLOAD:
                continue

            action = parse_client_message(raw)
            if action is None:
                continue

            try:
                await hub.on_action(room_id, websocket, action)
            except StoreError as exc:
                # Bu aksiyon için ölümcül; kanal açık kalır, bir sonraki aksiyon düzeltir
                hata(f"ws:action_failed {room_id} » {exc.message}")

    except WebSocketDisconnect:
        pass
    except Exception as e:
        konsol.log(f"[red]WebSocket Error:[/] {e}")
    finally:
        await hub.on_channel_close(room_id, websocket)
