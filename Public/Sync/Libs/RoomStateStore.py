# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from __future__ import annotations
from Libs       import VeriTabani
from ..Models   import RoomState, iso_zaman
from datetime   import datetime, timezone
from typing     import Callable

# `update` içinde "alan verilmedi" ile "None olarak ayarla" ayrımı için
BOS = object()

class RoomStateStore:
    """
    Oda durumlarının kalıcı kaydı (room_state tablosu).
    Sadece SyncHub tarafından okunur/yazılır; tam satır yazımı, son yazan kazanır.
    """

    def __init__(self, db: VeriTabani, saat: Callable[[], datetime] | None = None):
        self.db   = db
        self.saat = saat or (lambda: datetime.now(timezone.utc))

    @staticmethod
    def _satirdan(row) -> RoomState:
        return RoomState(
            room_id       = row["room_id"],
            video_path    = row["video_path"],
            position      = float(row["position"]),
            paused        = bool(row["paused"]),
            playback_rate = float(row["playback_rate"]),
            updated_at    = row["updated_at"],
        )

    async def get(self, room_id: str) -> RoomState:
        """Odayı getir; yoksa varsayılan satırı oluşturup döndür"""
        if row := await self._oku(room_id):
            return self._satirdan(row)

        # INSERT OR IGNORE: eş zamanlı ilk erişimlerde tek satır oluşur
        await self.db.yaz(
            """
            INSERT OR IGNORE INTO room_state (room_id, video_path, position, paused, playback_rate, updated_at)
            VALUES (?, NULL, 0, 1, 1, ?)
            """,
            (room_id, iso_zaman(self.saat())),
        )

        return self._satirdan(await self._oku(room_id))

    async def _oku(self, room_id: str):
        return await self.db.oku_bir(
            "SELECT room_id, video_path, position, paused, playback_rate, updated_at FROM room_state WHERE room_id = ?",
            (room_id,),
        )

    async def update(
        self,
        room_id       : str,
        video_path    : str | None | object = BOS,
        position      : float | object      = BOS,
        paused        : bool | object       = BOS,
        playback_rate : float | object      = BOS,
    ) -> RoomState:
        """Verilen alanları mevcut satırın üzerine yaz, `updated_at` damgala"""
        current = await self.get(room_id)

        # Duvar saati geri giderse damga geriye gitmesin
        damga = max(iso_zaman(self.saat()), current.updated_at)

        sonraki = RoomState(
            room_id       = room_id,
            video_path    = current.video_path    if video_path    is BOS else video_path,
            position      = current.position      if position      is BOS else float(position),
            paused        = current.paused        if paused        is BOS else bool(paused),
            playback_rate = current.playback_rate if playback_rate is BOS else float(playback_rate),
            updated_at    = damga,
        )

        await self.db.yaz(
            """
            UPDATE room_state
               SET video_path = ?, position = ?, paused = ?, playback_rate = ?, updated_at = ?
             WHERE room_id = ?
            """,
            (sonraki.video_path, sonraki.position, int(sonraki.paused), sonraki.playback_rate, sonraki.updated_at, room_id),
        )
        return sonraki
