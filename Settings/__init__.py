# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from pathlib import Path
from yaml    import load, FullLoader
from dotenv  import load_dotenv
import os

KOK_DIZIN = Path(__file__).resolve().parent.parent

# .env yükleme (ortam değişkenleri önceliklidir)
env_path = KOK_DIZIN / ".env"
load_dotenv(dotenv_path=env_path)

# AYAR.yml yükleme
with open(KOK_DIZIN / "AYAR.yml", "r", encoding="utf-8") as yaml_dosyasi:
    AYAR = load(yaml_dosyasi, Loader=FullLoader)

def _liste(deger: str) -> list[str]:
    return [parca.strip() for parca in deger.split(",") if parca.strip()]

# Genel ayarlar
PRODUCTION = os.getenv("PRODUCTION", "false").lower() == "true"
LOG_LEVEL  = os.getenv("LOG_LEVEL", "info").lower()

PROJE = AYAR["PROJE"]
HOST  = os.getenv("HOST", AYAR["APP"]["HOST"])
PORT  = int(os.getenv("PORT", AYAR["APP"]["PORT"]))

# Dizinler
DATA_DIR  = Path(os.getenv("DATA_DIR", str(KOK_DIZIN / "data"))).resolve()
DB_PATH   = os.getenv("DB_PATH", str(DATA_DIR / "syncplay.db"))
VIDEO_DIR = Path(os.getenv("VIDEO_DIR", str(KOK_DIZIN / "videos"))).resolve()

APP_BASE_URL = os.getenv("APP_BASE_URL", f"http://localhost:{PORT}")

# Oturum
SESSION_COOKIE    = "sp_session"
SESSION_TTL_HOURS = int(os.getenv("SESSION_TTL_HOURS", str(24 * 7)))

ADMIN_EMAILS = _liste(os.getenv("ADMIN_EMAILS", ""))
TEST_USERS   = _liste(os.getenv("TEST_USERS", ""))
