# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from __future__  import annotations
from CLI         import debug, uyari
from .Reconciler import MediaError
from typing      import Any, Awaitable, Callable
import asyncio, itertools, json, os, random, string, tempfile

# Olay olarak izlenen mpv property'leri
GOZLENEN = ("pause", "speed", "time-pos", "seeking")

class MpvPlayer:
    """
    mpv JSON IPC üzerinden medya öğesi.
    Property değişimleri önbelleğe alınır ve tarayıcı olaylarına çevrilir:
    pause -> play/pause, speed -> ratechange, seek + playback-restart -> seeked.
    """

    def __init__(self, http_headers: dict[str, str] | None = None, binary: str = "mpv", command_timeout: float = 5.0):
        self.http_headers    = http_headers or {}
        self.binary          = binary
        self.command_timeout = command_timeout
        self.ipc_path        = self._ipc_yolu()

        self.current_time  = 0.0
        self.paused        = True
        self.playback_rate = 1.0
        self.seeking       = False
        self.source        : str | None = None

        self.on_event : Callable[[str], Awaitable[Any]] | None = None

        self._proc    : asyncio.subprocess.Process | None = None
        self._reader  : asyncio.StreamReader | None = None
        self._writer  : asyncio.StreamWriter | None = None
        self._pending : dict[int, asyncio.Future] = {}
        self._ids     = itertools.count(1)
        self._task    : asyncio.Task | None = None
        self._seek_pending = False
        self._sub_id  : int | None = None

    @staticmethod
    def _ipc_yolu() -> str:
        ek = "".join(random.choice(string.ascii_lowercase) for _ in range(8))
        return os.path.join(tempfile.gettempdir(), f"syncplay-mpv-{ek}.sock")

    async def start(self) -> None:
        args = [
            self.binary,
            "--idle=yes",
            "--force-window=yes",
            "--pause",
            "--keep-open=yes",
            f"--input-ipc-server={self.ipc_path}",
        ]
        if self.http_headers:
            alanlar = ",".join(f"{ad}: {deger}" for ad, deger in self.http_headers.items())
            args.append(f"--http-header-fields={alanlar}")

        self._proc = await asyncio.create_subprocess_exec(
            *args, stdout=asyncio.subprocess.DEVNULL, stderr=asyncio.subprocess.DEVNULL
        )
        await self._connect()
        self._task = asyncio.create_task(self._read_loop())

        for numara, ad in enumerate(GOZLENEN, start=1):
            await self.command("observe_property", numara, ad)

    async def _connect(self, timeout: float = 5.0) -> None:
        loop     = asyncio.get_running_loop()
        deadline = loop.time() + timeout
        while True:
            try:
                self._reader, self._writer = await asyncio.open_unix_connection(self.ipc_path)
                return
            except OSError as hata:
                if loop.time() > deadline:
                    raise MediaError("mpv IPC bağlantısı kurulamadı") from hata
                await asyncio.sleep(0.1)

    async def command(self, *args) -> Any:
        if self._writer is None:
            raise MediaError("mpv başlatılmadı")

        request_id = next(self._ids)
        future     = asyncio.get_running_loop().create_future()
        self._pending[request_id] = future

        self._writer.write(json.dumps({"command": list(args), "request_id": request_id}).encode("utf-8") + b"\n")
        await self._writer.drain()

        try:
            cevap = await asyncio.wait_for(future, timeout=self.command_timeout)
        except asyncio.TimeoutError as hata:
            raise MediaError(f"mpv yanıt vermedi: {args[0]}") from hata
        finally:
            self._pending.pop(request_id, None)

        if cevap.get("error") != "success":
            raise MediaError(f"{args[0]}: {cevap.get('error')}")
        return cevap.get("data")

    async def _read_loop(self) -> None:
        while self._reader is not None:
            satir = await self._reader.readline()
            if not satir:
                break

            try:
                mesaj = json.loads(satir.decode("utf-8", errors="ignore"))
            except json.JSONDecodeError:
                continue

            if "request_id" in mesaj and "event" not in mesaj:
                future = self._pending.get(mesaj["request_id"])
                if future and not future.done():
                    future.set_result(mesaj)
                continue

            try:
                await self._handle_event(mesaj)
            except Exception as hata:
                # Dinleyicideki bir hata okuyucuyu durdurmasın
                uyari(f"mpv:event_error {mesaj.get('event')} » {type(hata).__name__}: {hata}")

        for future in self._pending.values():
            if not future.done():
                future.set_exception(MediaError("mpv bağlantısı kapandı"))

    async def _handle_event(self, mesaj: dict) -> None:
        olay = mesaj.get("event")

        if olay == "seek":
            self._seek_pending = True
            self.seeking       = True
            return

        if olay == "playback-restart":
            self.seeking = False
            if self._seek_pending:
                self._seek_pending = False
                await self._emit("seeked")
            return

        if olay != "property-change":
            return

        ad, veri = mesaj.get("name"), mesaj.get("data")

        if ad == "time-pos":
            self.current_time = float(veri or 0.0)
        elif ad == "seeking":
            self.seeking = bool(veri)
        elif ad == "pause" and veri is not None and bool(veri) != self.paused:
            self.paused = bool(veri)
            await self._emit("pause" if self.paused else "play")
        elif ad == "speed" and veri is not None and float(veri) != self.playback_rate:
            self.playback_rate = float(veri)
            await self._emit("ratechange")

    async def _emit(self, olay: str) -> None:
        debug(f"mpv:event {olay}")
        if self.on_event:
            await self.on_event(olay)

    # ============== MediaElement ==============

    async def load(self, source: str | None) -> None:
        self.source       = source
        self.current_time = 0.0
        self._sub_id      = None
        if source:
            await self.command("loadfile", source, "replace")
        else:
            await self.command("stop")

    async def play(self) -> None:
        await self.command("set_property", "pause", False)

    async def pause(self) -> None:
        await self.command("set_property", "pause", True)

    async def seek(self, position: float) -> None:
        self.current_time = float(position)
        await self.command("seek", float(position), "absolute")

    async def set_rate(self, rate: float) -> None:
        await self.command("set_property", "speed", float(rate))

    async def set_subtitle(self, url: str | None) -> None:
        if self._sub_id is not None:
            try:
                await self.command("sub-remove", self._sub_id)
            except MediaError as hata:
                uyari(f"mpv:sub_remove {hata}")
            self._sub_id = None

        if not url:
            return

        await self.command("sub-add", url, "select", "Subtitles", "en")
        self._sub_id = await self.command("get_property", "sid")

    async def stop(self) -> None:
        if self._task:
            self._task.cancel()
        if self._writer:
            self._writer.close()
            self._writer = None
        self._reader = None
        if self._proc and self._proc.returncode is None:
            self._proc.terminate()
            await self._proc.wait()
        if os.path.exists(self.ipc_path):
            os.unlink(self.ipc_path)
