# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from __future__   import annotations
from Libs         import InvalidPathError
from pathlib      import Path
from urllib.parse import quote
import hashlib, re

VIDEO_UZANTILARI   = (".mp4", ".webm", ".mkv", ".mov")
ALTYAZI_UZANTILARI = (".vtt", ".srt")

_ETIKET_DESENI = re.compile(r"^sub_\d+_([a-z0-9-]+)$", re.IGNORECASE)

def guvenli_yol(kok: Path, goreli: str) -> Path:
    """`goreli` yolunu `kok` altında çöz; dışarı taşarsa InvalidPathError"""
    kok = kok.resolve()
    yol = (kok / goreli).resolve()
    if yol == kok or kok not in yol.parents:
        raise InvalidPathError()
    return yol

def video_dosyalari(kok: Path) -> list[str]:
    """Her dizinden alfabetik ilk videonun göreli yolu (sıralı)"""
    dizinler: dict[Path, list[str]] = {}

    for yol in kok.rglob("*"):
        if not yol.is_file() or yol.suffix.lower() not in VIDEO_UZANTILARI:
            continue
        dizinler.setdefault(yol.parent, []).append(yol.relative_to(kok).as_posix())

    return sorted(min(dosyalar) for dosyalar in dizinler.values())

def etiket(dosya_adi: str) -> str:
    govde = re.sub(r"\.(vtt|srt)$", "", dosya_adi, flags=re.IGNORECASE)
    if eslesme := _ETIKET_DESENI.match(govde):
        return eslesme[1]
    return govde

def yol_ozeti(goreli: str) -> str:
    return hashlib.sha1(goreli.encode("utf-8")).hexdigest()

def _altyazilari_tara(kok: Path, video_yolu: str) -> list[dict]:
    video_dizini = guvenli_yol(kok, video_yolu).parent
    if not video_dizini.is_dir():
        return []

    izler, gorulen = [], set()
    for yol in video_dizini.rglob("*"):
        if not yol.is_file() or yol.suffix.lower() not in ALTYAZI_UZANTILARI:
            continue

        goreli = yol.relative_to(kok.resolve()).as_posix()
        if goreli in gorulen:
            continue
        gorulen.add(goreli)
        izler.append({"label": etiket(yol.name), "file": goreli})

    return sorted(izler, key=lambda iz: iz["label"].lower())

def altyazi_izleri(kok: Path, video_yolu: str) -> dict:
    """Videonun dizini (ve alt dizinleri) altındaki .vtt/.srt dosyaları"""
    izler = _altyazilari_tara(kok, video_yolu)

    return {
        "hash"   : yol_ozeti(video_yolu),
        "tracks" : [{"label": iz["label"], "url": f"/subs/{quote(iz['file'], safe='')}"} for iz in izler],
    }
