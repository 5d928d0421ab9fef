# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from conftest          import giris
from Libs              import InvalidPathError, RangeNotSatisfiable
from Public.Media.Libs import guvenli_yol, aralik_coz, etiket, video_dosyalari, altyazi_izleri
import pytest

@pytest.fixture
def kutuphane(video_dir):
    dosyalar = {
        "dizi/b2.mp4"                       : b"b2",
        "dizi/b1.mp4"                       : b"0123456789",
        "film/film.mkv"                     : b"mkv",
        "film/sub_1_english.vtt"            : b"WEBVTT\n",
        "film/altyazilar/sub_2_fre.srt"     : b"1\n",
        "film/notlar.txt"                   : b"-",
        "bos/aciklama.md"                   : b"-",
    }
    for goreli, icerik in dosyalar.items():
        yol = video_dir / goreli
        yol.parent.mkdir(parents=True, exist_ok=True)
        yol.write_bytes(icerik)

    (video_dir.parent / "gizli.vtt").write_bytes("WEBVTT\nsır\n".encode("utf-8"))
    return video_dir

# ============== Kütüphane ==============

def test_dizin_basina_ilk_video(kutuphane):
    assert video_dosyalari(kutuphane) == ["dizi/b1.mp4", "film/film.mkv"]

def test_altyazi_izleri(kutuphane):
    sonuc = altyazi_izleri(kutuphane, "film/film.mkv")

    assert [iz["label"] for iz in sonuc["tracks"]] == ["english", "fre"]
    assert sonuc["tracks"][0]["url"] == "/subs/film%2Fsub_1_english.vtt"
    assert len(sonuc["hash"]) == 40

@pytest.mark.parametrize("dosya_adi, beklenen", [
    ("sub_3_eng.vtt", "eng"),
    ("sub_12_pt-br.srt", "pt-br"),
    ("Turkce.vtt", "Turkce"),
])
def test_etiket(dosya_adi, beklenen):
    assert etiket(dosya_adi) == beklenen

@pytest.mark.parametrize("goreli", ["../gizli.vtt", "dizi/../../gizli.vtt", "/etc/passwd", "."])
def test_kok_disina_cikilamaz(kutuphane, goreli):
    with pytest.raises(InvalidPathError):
        guvenli_yol(kutuphane, goreli)

@pytest.mark.parametrize("baslik, beklenen", [
    ("bytes=2-5", (2, 5)),
    ("bytes=8-", (8, 9)),
    ("bytes=0-9", (0, 9)),
])
def test_aralik_coz(baslik, beklenen):
    assert aralik_coz(baslik, 10) == beklenen

@pytest.mark.parametrize("baslik", ["bytes=5-20", "bytes=6-3", "bytes=10-", "satirlar=1-2"])
def test_gecersiz_aralik(baslik):
    with pytest.raises(RangeNotSatisfiable):
        aralik_coz(baslik, 10)

# ============== HTTP ==============

def test_tam_dosya(client, kutuphane):
    yanit = client.get("/media/dizi/b1.mp4")

    assert yanit.status_code == 200
    assert yanit.content == b"0123456789"
    assert yanit.headers["accept-ranges"] == "bytes"

def test_kismi_icerik(client, kutuphane):
    yanit = client.get("/media/dizi/b1.mp4", headers={"Range": "bytes=2-5"})

    assert yanit.status_code == 206
    assert yanit.content == b"2345"
    assert yanit.headers["content-range"] == "bytes 2-5/10"
    assert yanit.headers["content-length"] == "4"

def test_acik_uclu_aralik(client, kutuphane):
    yanit = client.get("/media/dizi/b1.mp4", headers={"Range": "bytes=8-"})
    assert yanit.status_code == 206
    assert yanit.content == b"89"

def test_karsilanamayan_aralik(client, kutuphane):
    yanit = client.get("/media/dizi/b1.mp4", headers={"Range": "bytes=5-20"})
    assert yanit.status_code == 416

def test_olmayan_video(client, kutuphane):
    assert client.get("/media/dizi/yok.mp4").status_code == 404

def test_altyazi_kok_disi_reddedilir(client, kutuphane):
    yanit = client.get("/subs/..%2Fgizli.vtt")
    assert yanit.status_code == 403
    assert yanit.json() == {"error": "Invalid path"}

def test_altyazi_sunulur(client, kutuphane):
    yanit = client.get("/subs/film%2Fsub_1_english.vtt")

    assert yanit.status_code == 200
    assert yanit.headers["content-type"].startswith("text/vtt")
    assert yanit.text == "WEBVTT\n"

def test_video_ve_altyazi_api(client, kutuphane):
    baslik = giris(client, "user2@example.com")

    assert client.get("/api/videos", headers=baslik).json() == {"files": ["dizi/b1.mp4", "film/film.mkv"]}

    izler = client.get("/api/subtitles", params={"video": "film/film.mkv"}, headers=baslik).json()["tracks"]
    assert [iz["label"] for iz in izler] == ["english", "fre"]

    eksik = client.get("/api/subtitles", headers=baslik)
    assert eksik.status_code == 400
    assert eksik.json() == {"error": "Video required"}

    kacak = client.get("/api/subtitles", params={"video": "../../gizli.mp4"}, headers=baslik)
    assert kacak.status_code == 403
