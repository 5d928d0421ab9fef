# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from __future__ import annotations
from CLI        import debug
from typing     import Any, Protocol
import asyncio

SEND_TIMEOUT = 1.5   # Tek bir gönderim için üst sınır (yavaş istemci)
MAX_PENDING  = 16    # Kanal başına bekleyen mesaj sınırı

class Socket(Protocol):
    async def send_text(self, data: str) -> None: ...

class RoomChannel:
    """
    Tek bir gerçek zamanlı kanal için sıralı gönderim kuyruğu.
    `offer` asla beklemez; gönderimi kanalın kendi task'ı yapar.
    Kuyruk doluysa en eski (bayat) durum atılır.
    """

    def __init__(self, room_id: str, socket: Socket, send_timeout: float = SEND_TIMEOUT, max_pending: int = MAX_PENDING):
        self.room_id      = room_id
        self.socket       = socket
        self.send_timeout = send_timeout
        self.queue: asyncio.Queue[str] = asyncio.Queue(maxsize=max_pending)
        self.failures     = 0
        self._task: asyncio.Task | None = None

    def start(self) -> None:
        if self._task is None:
            self._task = asyncio.create_task(self._pump())

    def offer(self, payload: str) -> bool:
        """Mesajı kuyruğa bırak; eski bir mesaj atıldıysa False"""
        dropped = False
        if self.queue.full():
            try:
                self.queue.get_nowait()
                self.queue.task_done()
                dropped = True
            except asyncio.QueueEmpty:
                pass

        self.queue.put_nowait(payload)
        return not dropped

    async def _pump(self) -> None:
        while True:
            payload = await self.queue.get()
            try:
                await asyncio.wait_for(self.socket.send_text(payload), timeout=self.send_timeout)
            except asyncio.CancelledError:
                raise
            except Exception as hata:
                # Ölü/yavaş kanal diğerlerini etkilemez; kapanışı transport bildirir
                self.failures += 1
                debug(f"[yellow]ws:send_failed[/] {self.room_id} » {type(hata).__name__}: {hata}")
            finally:
                self.queue.task_done()

    async def drain(self) -> None:
        """Kuyruktaki tüm mesajlar işlenene kadar bekle"""
        await self.queue.join()

    async def close(self) -> None:
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
        self._task = None

class RoomRegistry:
    """Süreç içi oda üyeliği: room_id -> açık kanallar. Kalıcı değildir."""

    def __init__(self, send_timeout: float = SEND_TIMEOUT):
        self.send_timeout = send_timeout
        self._rooms: dict[str, dict[int, RoomChannel]] = {}

    def join(self, room_id: str, socket: Any) -> RoomChannel:
        channel = RoomChannel(room_id, socket, send_timeout=self.send_timeout)
        self._rooms.setdefault(room_id, {})[id(socket)] = channel
        channel.start()
        return channel

    async def leave(self, room_id: str, socket: Any) -> bool:
        members = self._rooms.get(room_id)
        if not members:
            return False

        channel = members.pop(id(socket), None)
        if not members:
            del self._rooms[room_id]

        if channel is None:
            return False

        await channel.close()
        return True

    def members(self, room_id: str) -> list[RoomChannel]:
        """Üyelerin anlık kopyası (broadcast sırasında değişebilir)"""
        return list(self._rooms.get(room_id, {}).values())

    def count(self, room_id: str) -> int:
        return len(self._rooms.get(room_id, {}))

    def rooms(self) -> list[str]:
        return list(self._rooms)

    async def drain(self, room_id: str) -> None:
        for channel in self.members(room_id):
            await channel.drain()

    async def close_all(self) -> None:
        for room_id in self.rooms():
            for channel in self.members(room_id):
                await channel.close()
        self._rooms.clear()
