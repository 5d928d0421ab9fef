# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from __future__         import annotations
from CLI                import debug
from enum               import Enum
from typing             import Awaitable, Callable, Protocol
from Public.Sync.Models import sonlu_sayi
from .subtitles         import SubtitleStage
import asyncio, time

# ============== Timing Constants (seconds) ==============
DRIFT_TOLERANCE  = 0.4   # Bu farkın altındaki konum sapmaları düzeltilmez
ECHO_SUPPRESSION = 0.6   # Uzak durum uygulandıktan sonra yerel olayların yutulduğu süre
PREFERRED_RETRY  = 0.3   # İz metadatası geç gelebilir; tercih ikinci kez uygulanır

# Medya olayı -> gönderilecek aksiyon
MEDIA_EVENTS = {
    "play"       : "play",
    "pause"      : "pause",
    "seeked"     : "seek",
    "ratechange" : "rate",
}

class MediaError(Exception):
    """Medya öğesi komutu uygulayamadı (ör. autoplay engeli)"""

class MediaElement(Protocol):
    current_time  : float
    paused        : bool
    playback_rate : float
    seeking       : bool
    source        : str | None

    async def load(self, source: str | None) -> None: ...
    async def play(self) -> None: ...
    async def pause(self) -> None: ...
    async def seek(self, position: float) -> None: ...
    async def set_rate(self, rate: float) -> None: ...
    async def set_subtitle(self, url: str | None) -> None: ...

class Faz(Enum):
    IDLE            = "idle"
    APPLYING_REMOTE = "applying_remote"

def hedef_konum(position: float, paused: bool, playback_rate: float, server_time_ms: float | None, now: float) -> float:
    """Oynuyorsa mesajın yolda geçirdiği süre kadar ileri taşınmış konum"""
    if paused:
        return position

    if server_time_ms is None:
        return position

    gecen = max(0.0, now - server_time_ms / 1000)
    return position + gecen * playback_rate

def duzeltme_gerekli(current: float, target: float, tolerance: float = DRIFT_TOLERANCE) -> bool:
    return abs(current - target) > tolerance

class Reconciler:
    """
    İstemci tarafı uzlaştırıcı.

    Gelen otoriter `state` mesajlarını yerel medya öğesine uygular ve
    bu sırada oluşan yerel olayları yutar (Idle <-> ApplyingRemote).
    Uygulama bittikten sonra `ECHO_SUPPRESSION` boyunca gelen olaylar da
    kendi değişikliğimizin yankısı sayılır. Geri kalan olaylar kullanıcı
    niyetidir ve aksiyon olarak yukarı gönderilir.
    """

    def __init__(
        self,
        media       : MediaElement,
        send_action : Callable[[dict], Awaitable[None]],
        subtitles   : SubtitleStage | None = None,
        media_url   : Callable[[str], str] = lambda video_path: video_path,
        clock       : Callable[[], float]  = time.time,
    ):
        self.media           = media
        self.send_action     = send_action
        self.subtitles       = subtitles or SubtitleStage(clock=clock)
        self.media_url       = media_url
        self.clock           = clock
        self.phase           = Faz.IDLE
        self.suppress_until  = 0.0
        self.current_video   : str | None = None
        self.preferred_retry = PREFERRED_RETRY
        self._apply_lock     = asyncio.Lock()
        self._tasks          : set[asyncio.Task] = set()

    # ============== Uzak durum ==============

    def suppressing(self) -> bool:
        return self.phase is Faz.APPLYING_REMOTE or self.clock() < self.suppress_until

    async def apply_state(self, data: dict) -> None:
        """Sunucudan gelen `state` verisini medya öğesine uygula"""
        async with self._apply_lock:
            self.phase = Faz.APPLYING_REMOTE
            try:
                await self._apply(data)
            finally:
                self.phase          = Faz.IDLE
                self.suppress_until = self.clock() + ECHO_SUPPRESSION

    async def _apply(self, data: dict) -> None:
        video_path = data.get("videoPath") or None
        paused     = bool(data.get("paused", True))
        rate       = sonlu_sayi(data.get("playbackRate"))
        rate       = rate if rate and rate > 0 else 1.0

        debug(f"reconciler:apply video={video_path} pos={data.get('position')} paused={paused} rate={rate}")

        if video_path != self.current_video:
            self.current_video = video_path
            await self._switch_video(video_path)

        if video_path:
            position = sonlu_sayi(data.get("position"))
            if position is not None:
                target = hedef_konum(position, paused, rate, sonlu_sayi(data.get("serverTime")), self.clock())
                if duzeltme_gerekli(self.media.current_time, target):
                    debug(f"reconciler:seek {self.media.current_time:.2f} -> {target:.2f}")
                    await self.media.seek(target)

            if paused:
                await self.media.pause()
            else:
                try:
                    await self.media.play()
                except MediaError as hata:
                    debug(f"[yellow]reconciler:play_rejected[/] {hata}")

        await self.media.set_rate(rate)

    async def _switch_video(self, video_path: str | None) -> None:
        await self.media.set_subtitle(None)
        self.subtitles.clear()

        if not video_path:
            await self.media.load(None)
            return

        await self.media.load(self.media_url(video_path))
        self._spawn(self.load_subtitles(video_path))

    # ============== Altyazılar ==============

    async def load_subtitles(self, video_path: str) -> None:
        """İzleri keşfet; tercihi hemen ve kısa bir gecikmeyle tekrar uygula"""
        if not await self.subtitles.discover(video_path):
            return

        await self.apply_preferred_subtitle()
        await asyncio.sleep(self.preferred_retry)
        await self.apply_preferred_subtitle()

    async def apply_preferred_subtitle(self) -> None:
        # Bu arada video değiştiyse eski videonun izi uygulanmaz
        if self.subtitles.last_video != self.current_video:
            return
        await self.media.set_subtitle(self.subtitles.apply_preferred() or None)

    async def select_subtitle(self, url: str) -> None:
        await self.media.set_subtitle(self.subtitles.select(url) or None)

    # ============== Yerel olaylar ==============

    async def on_media_event(self, event: str) -> bool:
        """Yerel medya olayı; aksiyon gönderildiyse True"""
        kind = MEDIA_EVENTS.get(event)
        if kind is None:
            return False

        if self.suppressing():
            debug(f"[dim]reconciler:echo[/] {event}")
            return False

        # Seek sırasında tetiklenen pause kullanıcı niyeti değildir
        if event == "pause" and self.media.seeking:
            return False

        await self.emit(kind)
        return True

    async def emit(self, kind: str) -> None:
        debug(f"reconciler:send {kind}")
        await self.send_action({
            "type"         : "action",
            "action"       : kind,
            "position"     : self.media.current_time,
            "playbackRate" : self.media.playback_rate,
        })

    async def seek_relative(self, delta: float) -> None:
        """±N sn butonları: her zaman `seek` gönderir, 0'ın altına inmez"""
        await self.media.seek(max(0.0, self.media.current_time + delta))
        await self.emit("seek")

    # ============== Arka plan işleri ==============

    def _spawn(self, coro) -> asyncio.Task:
        task = asyncio.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def wait_idle(self) -> None:
        """Bekleyen altyazı işleri bitene kadar bekle"""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    async def close(self) -> None:
        for task in list(self._tasks):
            task.cancel()
        await asyncio.gather(*self._tasks, return_exceptions=True)
