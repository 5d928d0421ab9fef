# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from rich.console   import Console
from rich.traceback import install as traceback_install
import sys

konsol = Console(log_path=False, highlight=False)
traceback_install(console=konsol, show_locals=False)

LOG_SEVIYELERI = {"debug": 10, "info": 20, "warn": 30, "error": 40}
_seviye        = LOG_SEVIYELERI["info"]

def log_seviyesi(seviye: str) -> None:
    """Global log seviyesini ayarla (bilinmeyen değer info sayılır)"""
    global _seviye
    _seviye = LOG_SEVIYELERI.get(str(seviye).lower(), LOG_SEVIYELERI["info"])

def _yaz(esik: int, etiket: str, *args) -> None:
    if _seviye > esik:
        return
    konsol.log(etiket, *args)

def debug(*args) -> None:
    _yaz(LOG_SEVIYELERI["debug"], "[dim]\\[debug][/]", *args)

def bilgi(*args) -> None:
    _yaz(LOG_SEVIYELERI["info"], "[cyan]\\[info][/]", *args)

def uyari(*args) -> None:
    _yaz(LOG_SEVIYELERI["warn"], "[yellow]\\[warn][/]", *args)

def hata(*args) -> None:
    _yaz(LOG_SEVIYELERI["error"], "[red]\\[error][/]", *args)

def cikis_yap(temizle: bool = True) -> None:
    if temizle:
        konsol.clear()
    konsol.print("\n[bold red]Çıkış yapılıyor...[/]")
    sys.exit(0)

def hata_yakala(hata_: BaseException) -> None:
    if isinstance(hata_, KeyboardInterrupt):
        cikis_yap(False)

    konsol.print(f"\n[bold red]{type(hata_).__name__}[/] [red]» {hata_}[/]")
    konsol.print_exception(show_locals=False)
    sys.exit(1)
