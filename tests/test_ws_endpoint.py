# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from conftest             import giris
from starlette.websockets import WebSocketDisconnect
import pytest

def test_oturumsuz_baglanti_reddedilir(client):
    with pytest.raises(WebSocketDisconnect) as hata:
        with client.websocket_connect("/ws?room=ws-reddet"):
            pass

    assert hata.value.code == 1008

def test_baglaninca_durum_gelir(client):
    baslik = giris(client, "admin@example.com")

    with client.websocket_connect("/ws?room=ws-ilk", headers=baslik) as ws:
        mesaj = ws.receive_json()

    assert mesaj["type"] == "state"
    assert mesaj["data"]["roomId"] == "ws-ilk"
    assert mesaj["data"]["paused"] is True
    assert isinstance(mesaj["data"]["serverTime"], int)

def test_aksiyon_herkese_yayinlanir(client):
    baslik = giris(client, "user1@example.com")

    with client.websocket_connect("/ws?room=ws-yayin", headers=baslik) as a, \
         client.websocket_connect("/ws?room=ws-yayin", headers=baslik) as b:
        a.receive_json()
        b.receive_json()

        a.send_json({"type": "action", "action": "play", "position": 42.0, "playbackRate": 1.0})

        for ws in (a, b):
            data = ws.receive_json()["data"]
            assert data["paused"]   is False
            assert data["position"] == 42.0

def test_bozuk_mesajlar_sessizce_atilir(client):
    baslik = giris(client, "user2@example.com")

    with client.websocket_connect("/ws?room=ws-bozuk", headers=baslik) as ws:
        ws.receive_json()

        ws.send_text("bu json değil")
        ws.send_json({"type": "action", "action": "foo", "position": 500})
        ws.send_json({"type": "action", "action": "seek", "position": 7.5})

        data = ws.receive_json()["data"]
        assert data["position"] == 7.5

def test_set_video_bagli_uyelere_yayinlanir(client):
    baslik = giris(client, "admin@example.com")

    with client.websocket_connect("/ws?room=ws-video", headers=baslik) as ws:
        ws.receive_json()

        ws.send_json({"type": "action", "action": "play", "position": 60.0})
        ws.receive_json()

        yanit = client.post("/api/room/set-video", json={"roomId": "ws-video", "videoPath": "dizi/b1.mp4"}, headers=baslik)
        assert yanit.json() == {"ok": True}

        data = ws.receive_json()["data"]
        assert data["videoPath"] == "dizi/b1.mp4"
        assert data["position"]  == 0.0
        assert data["paused"]    is True

def test_art_arda_gelen_aksiyonlarin_hicbiri_atilmaz(client):
    baslik = giris(client, "user1@example.com")

    with client.websocket_connect("/ws?room=ws-seri", headers=baslik) as ws:
        ws.receive_json()

        for konum in range(1, 36):
            ws.send_json({"type": "action", "action": "seek", "position": float(konum)})

        # Ara durumlar gönderim kuyruğunda birleşebilir, son durum her zaman gelir
        data = ws.receive_json()["data"]
        while data["position"] != 35.0:
            data = ws.receive_json()["data"]

    durum = client.get("/api/room/state", params={"room": "ws-seri"}, headers=baslik).json()
    assert durum["position"] == 35.0
