# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from pathlib import Path
import os, tempfile

# Settings modülü içe aktarılmadan önce geçici dizinler ayarlanmalı
GECICI = Path(tempfile.mkdtemp(prefix="syncplay-test-"))

os.environ["PRODUCTION"]   = "false"
os.environ["LOG_LEVEL"]    = "error"
os.environ["DATA_DIR"]     = str(GECICI / "data")
os.environ["DB_PATH"]      = str(GECICI / "data" / "test.db")
os.environ["VIDEO_DIR"]    = str(GECICI / "videos")
os.environ["ADMIN_EMAILS"] = ""
os.environ["TEST_USERS"]   = ""

import asyncio, json, pytest, pytest_asyncio
from fastapi.testclient import TestClient
from Libs               import VeriTabani
from Public.Sync.Libs   import RoomStateStore, RoomRegistry, SyncHub
from Public.Player.Libs import MediaError

class SahteSoket:
    """`send_text` ile gönderilenleri biriktiren sahte kanal"""

    def __init__(self, bozuk: bool = False, gecikme: float = 0.0):
        self.bozuk   = bozuk
        self.gecikme = gecikme
        self.gelen: list[dict] = []

    async def send_text(self, data: str) -> None:
        if self.gecikme:
            await asyncio.sleep(self.gecikme)
        if self.bozuk:
            raise ConnectionResetError("kanal kapalı")
        self.gelen.append(json.loads(data))

    @property
    def durumlar(self) -> list[dict]:
        return [mesaj["data"] for mesaj in self.gelen if mesaj.get("type") == "state"]

class SahteMedya:
    """Tarayıcı video öğesi gibi olay üreten medya öğesi"""

    def __init__(self):
        self.current_time    = 0.0
        self.paused          = True
        self.playback_rate   = 1.0
        self.seeking         = False
        self.source          = None
        self.subtitle        = None
        self.autoplay_engeli = False
        self.on_event        = None
        self.komutlar: list[tuple] = []

    async def _olay(self, olay: str) -> None:
        if self.on_event:
            await self.on_event(olay)

    async def load(self, source):
        self.komutlar.append(("load", source))
        self.source       = source
        self.current_time = 0.0
        self.paused       = True

    async def play(self):
        self.komutlar.append(("play",))
        if self.autoplay_engeli:
            raise MediaError("autoplay engellendi")
        if self.paused:
            self.paused = False
            await self._olay("play")

    async def pause(self):
        self.komutlar.append(("pause",))
        if not self.paused:
            self.paused = True
            await self._olay("pause")

    async def seek(self, position):
        self.komutlar.append(("seek", position))
        self.current_time = position
        await self._olay("seeked")

    async def set_rate(self, rate):
        if rate != self.playback_rate:
            self.komutlar.append(("rate", rate))
            self.playback_rate = rate
            await self._olay("ratechange")

    async def set_subtitle(self, url):
        self.komutlar.append(("subtitle", url))
        self.subtitle = url

class SahteSaat:
    def __init__(self, simdi: float = 1_700_000_000.0):
        self.simdi = simdi

    def __call__(self) -> float:
        return self.simdi

    def ilerle(self, saniye: float) -> None:
        self.simdi += saniye

@pytest_asyncio.fixture
async def db():
    veri_tabani = VeriTabani(":memory:")
    await veri_tabani.start()
    yield veri_tabani
    await veri_tabani.stop()

@pytest.fixture
def store(db):
    return RoomStateStore(db)

@pytest_asyncio.fixture
async def hub(store):
    sync_hub = SyncHub(store, RoomRegistry(send_timeout=0.2))
    yield sync_hub
    await sync_hub.close()

@pytest.fixture
def video_dir() -> Path:
    from Settings import VIDEO_DIR

    VIDEO_DIR.mkdir(parents=True, exist_ok=True)
    return VIDEO_DIR

@pytest.fixture
def client():
    from Core import kekik_FastAPI

    with TestClient(kekik_FastAPI) as test_client:
        yield test_client

def giris(client: TestClient, email: str) -> dict[str, str]:
    """E-posta ile giriş yap, oturum çerezini başlık olarak döndür"""
    yanit = client.post("/api/auth/login", json={"email": email})
    assert yanit.status_code == 200, yanit.text

    token = yanit.cookies.get("sp_session")
    client.cookies.clear()
    return {"cookie": f"sp_session={token}"}
