# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from dataclasses import dataclass, field
from datetime    import datetime, timezone
import math

ACTION_KINDS = frozenset({"play", "pause", "seek", "rate", "sync"})

def iso_zaman(an: datetime | None = None) -> str:
    """JS `toISOString()` biçiminde UTC zaman damgası (ms hassasiyet)"""
    an = an or datetime.now(timezone.utc)
    return an.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

def sonlu_sayi(deger) -> float | None:
    """Sonlu bir sayıya çevrilebiliyorsa float, değilse None"""
    if isinstance(deger, bool) or deger is None:
        return None

    try:
        sayi = float(deger)
    except (TypeError, ValueError):
        return None

    return sayi if math.isfinite(sayi) else None

@dataclass
class RoomState:
    """Bir odanın otoriter oynatım durumu"""
    room_id       : str
    video_path    : str | None = None
    position      : float      = 0.0
    paused        : bool       = True
    playback_rate : float      = 1.0
    updated_at    : str        = field(default_factory=iso_zaman)

    def to_wire(self, server_time: int) -> dict:
        return {
            "roomId"       : self.room_id,
            "videoPath"    : self.video_path,
            "position"     : self.position,
            "paused"       : self.paused,
            "playbackRate" : self.playback_rate,
            "updatedAt"    : self.updated_at,
            "serverTime"   : server_time,
        }

    def ayni_durum(self, diger: "RoomState") -> bool:
        """`updated_at` hariç eşitlik"""
        return (
            self.room_id       == diger.room_id
            and self.video_path    == diger.video_path
            and self.position      == diger.position
            and self.paused        == diger.paused
            and self.playback_rate == diger.playback_rate
        )

@dataclass
class Action:
    """İstemciden gelen oynatım niyeti; kalıcı değildir"""
    kind          : str
    position      : float | None = None
    playback_rate : float | None = None

    @property
    def known(self) -> bool:
        return self.kind in ACTION_KINDS

    @property
    def paused(self) -> bool | None:
        """Türün ima ettiği pause değeri; play/pause dışındakiler dokunmaz"""
        if self.kind == "pause":
            return True
        if self.kind == "play":
            return False
        return None

    @classmethod
    def from_payload(cls, payload: dict) -> "Action":
        position = sonlu_sayi(payload.get("position"))
        if position is not None and position < 0:
            position = None

        rate = sonlu_sayi(payload.get("playbackRate"))
        if rate is not None and rate <= 0:
            rate = None

        return cls(kind=str(payload.get("action")), position=position, playback_rate=rate)
