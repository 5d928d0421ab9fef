# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from conftest                  import SahteMedya
from Public.Player.Libs.client import SyncClient
import httpx, json, pytest, pytest_asyncio

def sahte_sunucu(istek: httpx.Request) -> httpx.Response:
    if istek.url.path == "/api/auth/login":
        if json.loads(istek.content)["email"] != "admin@example.com":
            return httpx.Response(403, json={"error": "Email not invited"})
        return httpx.Response(200, json={"ok": True}, headers={"set-cookie": "sp_session=abc123; Path=/; HttpOnly"})

    if istek.url.path == "/api/me":
        return httpx.Response(200, json={"user": {"userId": 1, "email": "admin@example.com", "isAdmin": True}})

    if istek.url.path == "/api/subtitles":
        return httpx.Response(200, json={"tracks": [{"label": "english", "url": "/subs/film%2Fsub_1_english.vtt"}]})

    return httpx.Response(404, json={"error": "Not found"})

@pytest_asyncio.fixture
async def istemci():
    http   = httpx.AsyncClient(base_url="http://sunucu:3000/", transport=httpx.MockTransport(sahte_sunucu))
    client = SyncClient("http://sunucu:3000", "salon 1", SahteMedya(), http=http)
    yield client
    await client.close()

def test_adresler(istemci):
    assert istemci.ws_url == "ws://sunucu:3000/ws?room=salon%201"
    assert istemci.media_url("dizi/b1.mp4") == "http://sunucu:3000/media/dizi%2Fb1.mp4"

async def test_giris_ve_cerez(istemci):
    user = await istemci.login("admin@example.com")

    assert user["isAdmin"] is True
    assert istemci.cookie_header == "sp_session=abc123"

    with pytest.raises(PermissionError):
        await istemci.login("yabanci@example.com")

async def test_altyazi_kesfi_mutlak_url(istemci):
    izler = await istemci.discover_subtitles("film/film.mkv")
    assert izler == [{"label": "english", "url": "http://sunucu:3000/subs/film%2Fsub_1_english.vtt"}]

async def test_state_mesaji_uygulanir(istemci):
    await istemci.handle_message("bozuk")
    await istemci.handle_message(json.dumps({"type": "hello"}))
    assert istemci.media.source is None

    await istemci.handle_message(json.dumps({
        "type" : "state",
        "data" : {"videoPath": "dizi/b1.mp4", "position": 0, "paused": True, "playbackRate": 1, "serverTime": None},
    }))
    await istemci.reconciler.wait_idle()

    assert istemci.media.source == "http://sunucu:3000/media/dizi%2Fb1.mp4"

async def test_kanal_yokken_gonderim_atlanir(istemci):
    await istemci.send({"type": "action", "action": "play"})
