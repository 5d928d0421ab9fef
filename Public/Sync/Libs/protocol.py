# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from ..Models import Action, RoomState
import json, time

def server_time_ms() -> int:
    return int(time.time() * 1000)

def state_message(state: RoomState, server_time: int | None = None) -> dict:
    """Sunucu -> istemci `state` mesajı"""
    return {
        "type" : "state",
        "data" : state.to_wire(server_time if server_time is not None else server_time_ms()),
    }

def encode(message: dict) -> str:
    return json.dumps(message, ensure_ascii=False)

def parse_client_message(raw: str | bytes) -> Action | None:
    """
    İstemci -> sunucu mesajını çöz.
    Çözülemeyen veya tanınmayan her şey None (sessizce atılır).
    """
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError:
            return None

    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, TypeError):
        return None

    if not isinstance(payload, dict) or payload.get("type") != "action":
        return None

    if not isinstance(payload.get("action"), str):
        return None

    return Action.from_payload(payload)
