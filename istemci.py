# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from CLI                       import konsol, log_seviyesi, cikis_yap, hata_yakala
from Public.Player.Libs.mpv    import MpvPlayer
from Public.Player.Libs.client import SyncClient
import argparse, asyncio, sys

YARDIM = "Komutlar: play | pause | fwd 10 | back 10 | rate 1.25 | subs | sub <n> | quit"

async def komut_dongusu(client: SyncClient, player: MpvPlayer):
    reconciler = client.reconciler

    while True:
        satir = await asyncio.to_thread(sys.stdin.readline)
        if not satir:
            await asyncio.sleep(0.1)
            continue

        parcalar = satir.strip().split()
        if not parcalar:
            continue

        komut, argumanlar = parcalar[0].lower(), parcalar[1:]

        try:
            if komut in ("quit", "exit"):
                return
            elif komut == "play":
                await player.play()
            elif komut == "pause":
                await player.pause()
            elif komut in ("fwd", "back"):
                delta = float(argumanlar[0]) if argumanlar else 10.0
                await reconciler.seek_relative(delta if komut == "fwd" else -delta)
            elif komut == "rate" and argumanlar:
                await player.set_rate(float(argumanlar[0]))
            elif komut == "subs":
                for sira, secenek in enumerate(reconciler.subtitles.options):
                    isaret = "*" if secenek["url"] == reconciler.subtitles.selected else " "
                    konsol.print(f"{isaret} {sira}: {secenek['label']}")
            elif komut == "sub" and argumanlar:
                secenek = reconciler.subtitles.options[int(argumanlar[0])]
                await reconciler.select_subtitle(secenek["url"])
            else:
                konsol.print(YARDIM)
        except (ValueError, IndexError):
            konsol.print(YARDIM)

async def calistir(url: str, room: str, email: str):
    player = MpvPlayer()
    client = SyncClient(url, room, player)

    kullanici = await client.login(email)
    konsol.log(f"[green]Oturum açıldı:[/] {kullanici.get('email')} [dim](admin={kullanici.get('isAdmin')})[/]")

    player.http_headers = {"Cookie": client.cookie_header}
    player.on_event     = client.reconciler.on_media_event
    await player.start()

    dinleyici = asyncio.create_task(client.run())
    komutlar  = asyncio.create_task(komut_dongusu(client, player))

    try:
        await asyncio.wait({dinleyici, komutlar}, return_when=asyncio.FIRST_COMPLETED)
        if dinleyici.done() and not dinleyici.cancelled() and dinleyici.exception():
            konsol.log(f"[red]Bağlantı koptu:[/] {dinleyici.exception()}")
    finally:
        for task in (dinleyici, komutlar):
            task.cancel()
        await client.close()
        await player.stop()

def main():
    ap = argparse.ArgumentParser(description="SyncPlay mpv istemcisi")
    ap.add_argument("--url", default="http://localhost:3000", help="Sunucu adresi")
    ap.add_argument("--room", default="main", help="Oda kimliği")
    ap.add_argument("--email", required=True, help="Davetli e-posta adresi")
    ap.add_argument("--log-level", default="info", help="debug | info | warn | error")
    args = ap.parse_args()

    log_seviyesi(args.log_level)
    konsol.print(YARDIM)
    asyncio.run(calistir(args.url, args.room, args.email))

if __name__ == "__main__":
    try:
        main()
        cikis_yap(False)
    except Exception as hata:
        hata_yakala(hata)
