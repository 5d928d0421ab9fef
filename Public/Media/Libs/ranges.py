# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from Libs    import RangeNotSatisfiable
from pathlib import Path
import re

PARCA_BOYUTU = 256 * 1024

_ARALIK = re.compile(r"bytes=(\d+)-(\d+)?")

def aralik_coz(baslik: str, boyut: int) -> tuple[int, int]:
    """`Range: bytes=a-b` başlığını (start, end) dahil aralığa çevir"""
    eslesme = _ARALIK.search(baslik)
    if not eslesme:
        raise RangeNotSatisfiable()

    start = int(eslesme[1])
    end   = int(eslesme[2]) if eslesme[2] else boyut - 1

    if start > end or end >= boyut:
        raise RangeNotSatisfiable()

    return start, end

def dosya_parcasi(yol: Path, start: int, end: int):
    """[start, end] aralığını parça parça okuyan generator"""
    kalan = end - start + 1
    with open(yol, "rb") as dosya:
        dosya.seek(start)
        while kalan > 0:
            parca = dosya.read(min(PARCA_BOYUTU, kalan))
            if not parca:
                break
            kalan -= len(parca)
            yield parca
