# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from CLI              import konsol, log_seviyesi
from fastapi          import FastAPI
from contextlib       import asynccontextmanager
from Libs             import VeriTabani
from Public.Auth.Libs import AuthStore
from Public.Sync.Libs import RoomStateStore, RoomRegistry, SyncHub
from Settings         import (
    LOG_LEVEL, PRODUCTION, DATA_DIR, DB_PATH, VIDEO_DIR,
    SESSION_TTL_HOURS, ADMIN_EMAILS, TEST_USERS
)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """FastAPI lifespan events - startup ve shutdown"""
    log_seviyesi(LOG_LEVEL)

    DATA_DIR.mkdir(parents=True, exist_ok=True)
    VIDEO_DIR.mkdir(parents=True, exist_ok=True)

    db = VeriTabani(DB_PATH)
    await db.start()

    app.state.db         = db
    app.state.auth_store = AuthStore(db, session_ttl_hours=SESSION_TTL_HOURS)
    app.state.sync_hub   = SyncHub(RoomStateStore(db), RoomRegistry())

    await app.state.auth_store.seed_users(ADMIN_EMAILS, TEST_USERS, PRODUCTION)
    konsol.log(f"[green]Veritabanı hazır:[/] {DB_PATH}")

    try:
        yield
    finally:
        await app.state.sync_hub.close()
        await db.stop()
