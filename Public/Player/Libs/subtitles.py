# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from __future__ import annotations
from CLI        import debug
from typing     import Awaitable, Callable
import re, time

DISCOVERY_DEBOUNCE = 30.0   # Aynı video için tekrar keşif yapılmayacak süre (sn)

OFF = {"label": "Off", "url": ""}

_INGILIZCE = re.compile(r"\beng\b|english", re.IGNORECASE)

def tercih_edilen(secenekler: list[dict]) -> dict | None:
    """İngilizce etiketli ilk iz, yoksa "Off" dışındaki ilk iz"""
    for secenek in secenekler:
        if _INGILIZCE.search(secenek.get("label") or ""):
            return secenek
    return secenekler[1] if len(secenekler) > 1 else None

class SubtitleStage:
    """
    Altyazı seçim listesi (her zaman "Off" ile başlar) ve keşif durumu.
    Aynı video için keşif eş zamanlı çalışmaz ve 30 sn içinde tekrarlanmaz.
    Daha yeni bir keşif ya da `clear()` gelmişse eski keşfin sonucu atılır.
    """

    def __init__(self, discover: Callable[[str], Awaitable[list[dict]]] | None = None, clock: Callable[[], float] = time.time):
        self._discover      = discover
        self.clock          = clock
        self.options        = [dict(OFF)]
        self.selected       = ""
        self.loading        = False
        self.loading_video  : str | None = None
        self.last_video     : str | None = None
        self.last_loaded_at = 0.0
        self._nesil         = 0

    def clear(self) -> None:
        # Süren keşif artık geçersiz
        self._nesil        += 1
        self.options        = [dict(OFF)]
        self.selected       = ""
        self.loading        = False
        self.loading_video  = None

    def should_discover(self, video_path: str | None) -> bool:
        if not video_path or self._discover is None:
            return False

        if self.loading and self.loading_video == video_path:
            debug(f"subtitles:skip_in_flight {video_path}")
            return False

        if self.last_video == video_path and self.clock() - self.last_loaded_at < DISCOVERY_DEBOUNCE:
            debug(f"subtitles:skip_recent {video_path}")
            return False

        return True

    async def discover(self, video_path: str | None) -> bool:
        """İzleri keşfet ve listeyi yenile; sonuç uygulandıysa True"""
        if not self.should_discover(video_path):
            return False

        self._nesil       += 1
        nesil              = self._nesil
        self.loading       = True
        self.loading_video = video_path
        onceki             = self.selected
        debug(f"subtitles:start {video_path} önceki={onceki!r}")

        try:
            izler = await self._discover(video_path)
        except Exception as hata:
            debug(f"[yellow]subtitles:error[/] {video_path} » {type(hata).__name__}: {hata}")
            izler = None
        finally:
            # İptal edilen güncel keşif kilidi açık bırakmasın
            if nesil == self._nesil:
                self.loading       = False
                self.loading_video = None

        if nesil != self._nesil:
            debug(f"[dim]subtitles:stale[/] {video_path}")
            return False

        if izler is not None:
            self.options = [dict(OFF), *[
                {"label": iz.get("label") or iz.get("url", ""), "url": iz.get("url", "")}
                for iz in izler
            ]]
            self.apply_preferred()

            # Yeniden yüklemeden sağ çıkan önceki seçim korunur
            if onceki and any(secenek["url"] == onceki for secenek in self.options):
                self.selected = onceki

        self.last_loaded_at = self.clock()
        self.last_video     = video_path

        debug(f"subtitles:done {video_path} count={len(self.options)}")
        return True

    def apply_preferred(self) -> str:
        secenek = tercih_edilen(self.options)
        if secenek:
            self.selected = secenek["url"]
        return self.selected

    def select(self, url: str) -> str:
        """Kullanıcı seçimi; listede olmayan url "Off" sayılır"""
        self.selected = url if any(secenek["url"] == url for secenek in self.options) else ""
        return self.selected
