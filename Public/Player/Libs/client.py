# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from __future__            import annotations
from CLI                   import konsol, debug
from .Reconciler           import Reconciler, MediaElement
from .subtitles            import SubtitleStage
from urllib.parse          import quote, urljoin
from websockets.exceptions import ConnectionClosed
import httpx, json, websockets

SESSION_COOKIE = "sp_session"

class SyncClient:
    """
    Odaya bağlanan Python istemcisi.
    httpx ile oturum açar ve altyazı keşfeder; `websockets` ile `/ws` kanalını
    dinleyip gelen `state` mesajlarını uzlaştırıcıya verir.
    """

    def __init__(self, base_url: str, room: str, media: MediaElement, http: httpx.AsyncClient | None = None):
        self.base_url = base_url.rstrip("/") + "/"
        self.room     = room
        self.media    = media
        self.http     = http or httpx.AsyncClient(base_url=self.base_url, timeout=10.0, follow_redirects=True)
        self.ws       = None

        self.reconciler = Reconciler(
            media       = media,
            send_action = self.send,
            subtitles   = SubtitleStage(discover=self.discover_subtitles),
            media_url   = self.media_url,
        )

    @property
    def ws_url(self) -> str:
        scheme = "wss" if self.base_url.startswith("https") else "ws"
        host   = self.base_url.split("://", 1)[1]
        return f"{scheme}://{host}ws?room={quote(self.room, safe='')}"

    @property
    def cookie_header(self) -> str:
        token = self.http.cookies.get(SESSION_COOKIE)
        return f"{SESSION_COOKIE}={token}" if token else ""

    def media_url(self, video_path: str) -> str:
        return urljoin(self.base_url, f"media/{quote(video_path, safe='')}")

    async def login(self, email: str) -> dict:
        response = await self.http.post("api/auth/login", json={"email": email})
        if response.status_code != 200:
            raise PermissionError(response.json().get("error", "Request failed"))

        me = (await self.http.get("api/me")).json()
        return me.get("user") or {}

    async def discover_subtitles(self, video_path: str) -> list[dict]:
        response = await self.http.get("api/subtitles", params={"video": video_path})
        response.raise_for_status()
        return [
            {"label": iz.get("label", ""), "url": urljoin(self.base_url, iz["url"].lstrip("/"))}
            for iz in response.json().get("tracks", [])
        ]

    async def send(self, message: dict) -> None:
        """Kanal açıksa aksiyonu gönder; değilse sessizce atla"""
        if self.ws is None:
            return
        try:
            await self.ws.send(json.dumps(message))
        except ConnectionClosed:
            debug("[yellow]ws:send_closed[/]")

    async def handle_message(self, raw: str | bytes) -> None:
        try:
            payload = json.loads(raw)
        except (json.JSONDecodeError, TypeError):
            return

        if not isinstance(payload, dict) or payload.get("type") != "state":
            return

        await self.reconciler.apply_state(payload.get("data") or {})

    async def run(self) -> None:
        headers = {"Cookie": self.cookie_header} if self.cookie_header else {}
        konsol.log(f"[cyan]Bağlanılıyor:[/] {self.ws_url}")

        async with websockets.connect(self.ws_url, additional_headers=headers) as ws:
            self.ws = ws
            try:
                async for raw in ws:
                    await self.handle_message(raw)
            finally:
                self.ws = None

    async def close(self) -> None:
        await self.reconciler.close()
        await self.http.aclose()
