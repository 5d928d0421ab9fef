# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from __future__      import annotations
from CLI             import debug, bilgi
from ..Models        import Action, RoomState
from .RoomStateStore import RoomStateStore
from .RoomRegistry   import RoomRegistry, RoomChannel
from .protocol       import state_message, encode
from typing          import Any, Callable
import asyncio, time

class SyncHub:
    """
    Bir odanın gerçek zamanlı durumunun tek hakemi.
    Aynı oda için aksiyonlar oda kilidi altında sırayla uygulanır
    (oku-değiştir-yaz + yayın tek adım). Farklı odalar paralel ilerler.
    """

    def __init__(self, store: RoomStateStore, registry: RoomRegistry | None = None, clock: Callable[[], float] = time.time):
        self.store    = store
        self.registry = registry or RoomRegistry()
        self.clock    = clock
        # Odalar kalıcıdır; görülen her oda için kilit süreç boyunca tutulur
        self._locks: dict[str, asyncio.Lock] = {}

    def _lock(self, room_id: str) -> asyncio.Lock:
        lock = self._locks.get(room_id)
        if lock is None:
            lock = self._locks[room_id] = asyncio.Lock()
        return lock

    def _server_time(self) -> int:
        return int(self.clock() * 1000)

    def _publish_locked(self, room_id: str, state: RoomState) -> int:
        """Oda kilidi altında çağrılmalı: durumu tüm üyelerin kuyruğuna bırak"""
        payload = encode(state_message(state, self._server_time()))
        members = self.registry.members(room_id)
        for channel in members:
            channel.offer(payload)
        return len(members)

    async def get_state(self, room_id: str) -> RoomState:
        return await self.store.get(room_id)

    def snapshot(self, state: RoomState) -> dict:
        """HTTP yanıtı için `state` verisi (serverTime dahil)"""
        return state.to_wire(self._server_time())

    async def on_channel_open(self, room_id: str, socket: Any) -> RoomChannel:
        """Kanalı odaya kaydet ve mevcut durumu hemen gönder"""
        async with self._lock(room_id):
            # Durum okunamazsa kanal odaya hiç eklenmez
            state   = await self.store.get(room_id)
            channel = self.registry.join(room_id, socket)
            channel.offer(encode(state_message(state, self._server_time())))

        bilgi(f"[green]ws:open[/] {room_id} [dim]({self.registry.count(room_id)} üye)[/]")
        return channel

    async def on_channel_close(self, room_id: str, socket: Any) -> None:
        """Kanalı odadan çıkar; diğer üyelere bildirim yapılmaz"""
        await self.registry.leave(room_id, socket)
        bilgi(f"[yellow]ws:close[/] {room_id} [dim]({self.registry.count(room_id)} üye)[/]")

    async def on_action(self, room_id: str, socket: Any, action: Action) -> RoomState | None:
        """Aksiyonu uygula ve sonucu gönderen dahil herkese yayınla"""
        if not action.known:
            debug(f"[dim]ws:action_ignored[/] {room_id} » {action.kind}")
            return None

        debug(f"[magenta]ws:action[/] {room_id} » {action}")

        changes: dict[str, Any] = {}
        if action.paused is not None:
            changes["paused"] = action.paused
        if action.position is not None:
            changes["position"] = action.position
        if action.playback_rate is not None:
            changes["playback_rate"] = action.playback_rate

        async with self._lock(room_id):
            state = await self.store.update(room_id, **changes)
            self._publish_locked(room_id, state)

        return state

    async def set_video(self, room_id: str, video_path: str | None) -> RoomState:
        """Yönetici işlemi: videoyu değiştir, konumu sıfırla, durdur ve yayınla"""
        bilgi(f"[cyan]room:set-video[/] {room_id} » {video_path}")

        async with self._lock(room_id):
            state = await self.store.update(room_id, video_path=video_path or None, position=0.0, paused=True)
            self._publish_locked(room_id, state)

        return state

    async def close(self) -> None:
        await self.registry.close_all()
