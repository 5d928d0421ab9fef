# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from CLI              import konsol, cikis_yap, hata_yakala
from Libs             import VeriTabani
from Public.Auth.Libs import AuthStore
from Settings         import DB_PATH, APP_BASE_URL
from pathlib          import Path
import argparse, asyncio

async def davet_olustur(emails: list[str], db_path: str = DB_PATH, base_url: str = APP_BASE_URL) -> list[tuple[str, str]]:
    """Her e-posta için tek kullanımlık davet oluştur; (email, bağlantı) listesi döner"""
    adresler = [email.strip().lower() for email in emails if email.strip()]
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    db = VeriTabani(db_path)
    await db.start()
    try:
        store = AuthStore(db)
        return [
            (email, f"{base_url.rstrip('/')}/invite/{await store.create_invite(email, 'cli')}")
            for email in adresler
        ]
    finally:
        await db.stop()

def main():
    ap = argparse.ArgumentParser(description="SyncPlay davet bağlantısı oluşturucu")
    ap.add_argument("emails", nargs="+", help="Davet edilecek e-posta adresleri")
    ap.add_argument("--db", default=DB_PATH, help="Veritabanı yolu")
    ap.add_argument("--base-url", default=APP_BASE_URL, help="Bağlantılarda kullanılacak adres")
    args = ap.parse_args()

    davetler = asyncio.run(davet_olustur(args.emails, args.db, args.base_url))
    if not davetler:
        ap.error("en az bir e-posta adresi gerekli")

    for email, baglanti in davetler:
        konsol.print(f"[green]{email}[/] -> {baglanti}")

if __name__ == "__main__":
    try:
        main()
        cikis_yap(False)
    except Exception as hata:
        hata_yakala(hata)
