# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from Public.Sync.Libs   import parse_client_message, state_message, encode
from Public.Sync.Models import RoomState, Action, sonlu_sayi
import json, pytest

@pytest.mark.parametrize("raw", [
    "bozuk json",
    "[1, 2, 3]",
    '{"type": "state", "action": "play"}',
    '{"type": "action"}',
    '{"type": "action", "action": 5}',
    b"\xff\xfe",
    "",
])
def test_cozulemeyen_mesajlar_none(raw):
    assert parse_client_message(raw) is None

def test_gecerli_aksiyon():
    action = parse_client_message(b'{"type": "action", "action": "seek", "position": 12.5, "playbackRate": 1.5}')

    assert action == Action("seek", position=12.5, playback_rate=1.5)
    assert action.known
    assert action.paused is None

def test_eksik_ve_gecersiz_alanlar_none():
    action = parse_client_message('{"type": "action", "action": "play", "position": -3, "playbackRate": 0}')

    assert action.kind          == "play"
    assert action.paused        is False
    assert action.position      is None
    assert action.playback_rate is None

def test_bilinmeyen_tur_tanimsiz():
    action = parse_client_message('{"type": "action", "action": "foo"}')
    assert action is not None
    assert not action.known

@pytest.mark.parametrize("deger, beklenen", [
    (3, 3.0),
    ("2.5", 2.5),
    (True, None),
    (None, None),
    (float("nan"), None),
    (float("inf"), None),
    ("abc", None),
])
def test_sonlu_sayi(deger, beklenen):
    assert sonlu_sayi(deger) == beklenen

def test_state_mesaji_bicimi():
    state = RoomState("main", "film.mp4", 4.0, False, 1.25, "2026-01-01T00:00:00.000Z")
    mesaj = json.loads(encode(state_message(state, 1234)))

    assert mesaj == {
        "type" : "state",
        "data" : {
            "roomId"       : "main",
            "videoPath"    : "film.mp4",
            "position"     : 4.0,
            "paused"       : False,
            "playbackRate" : 1.25,
            "updatedAt"    : "2026-01-01T00:00:00.000Z",
            "serverTime"   : 1234,
        },
    }
