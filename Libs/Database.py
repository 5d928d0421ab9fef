# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from __future__ import annotations
from .Hatalar   import StoreError
from typing     import Any, Iterable
import aiosqlite, asyncio

SCHEMA = """
PRAGMA journal_mode = WAL;

CREATE TABLE IF NOT EXISTS users (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    email       TEXT UNIQUE NOT NULL,
    is_admin    INTEGER NOT NULL DEFAULT 0,
    created_at  TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS invites (
    id              INTEGER PRIMARY KEY AUTOINCREMENT,
    token           TEXT UNIQUE NOT NULL,
    email           TEXT,
    uses_remaining  INTEGER NOT NULL,
    expires_at      TEXT,
    created_by      TEXT,
    created_at      TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS sessions (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id     INTEGER NOT NULL,
    token       TEXT UNIQUE NOT NULL,
    expires_at  TEXT NOT NULL,
    created_at  TEXT NOT NULL,
    FOREIGN KEY (user_id) REFERENCES users(id)
);

CREATE TABLE IF NOT EXISTS room_state (
    room_id        TEXT PRIMARY KEY,
    video_path     TEXT,
    position       REAL NOT NULL DEFAULT 0,
    paused         INTEGER NOT NULL DEFAULT 1,
    playback_rate  REAL NOT NULL DEFAULT 1,
    updated_at     TEXT NOT NULL
);
"""

class VeriTabani:
    """
    Paylaşımlı aiosqlite bağlantısı.
    Lifespan içinde `start()` ile açılır, `stop()` ile kapatılır.
    Yazma işlemleri tek bir lock altında execute + commit yapılır.
    """

    def __init__(self, db_path: str):
        self.db_path = db_path
        self._conn : aiosqlite.Connection | None = None
        self._lock = asyncio.Lock()

    @property
    def baglanti(self) -> aiosqlite.Connection:
        if self._conn is None:
            raise RuntimeError("VeriTabani henüz başlatılmadı! lifespan içinde 'start()' çağrılmalı.")
        return self._conn

    async def start(self):
        if self._conn is not None:
            return

        try:
            self._conn = await aiosqlite.connect(self.db_path)
            self._conn.row_factory = aiosqlite.Row
            await self._conn.executescript(SCHEMA)
            await self._conn.commit()
        except aiosqlite.Error as hata:
            raise StoreError(f"Veritabanı açılamadı: {hata}") from hata

    async def stop(self):
        if self._conn:
            await self._conn.close()
            self._conn = None

    async def yaz(self, sql: str, params: Iterable[Any] = ()) -> int:
        """Tek bir yazma sorgusu; etkilenen satır sayısını döndürür"""
        async with self._lock:
            try:
                cursor = await self.baglanti.execute(sql, tuple(params))
                await self.baglanti.commit()
                return cursor.rowcount
            except aiosqlite.Error as hata:
                raise StoreError(f"Yazma hatası: {hata}") from hata

    async def toplu_yaz(self, sorgular: list[tuple[str, Iterable[Any]]]) -> None:
        """Birden fazla yazmayı tek commit altında uygula"""
        async with self._lock:
            try:
                for sql, params in sorgular:
                    await self.baglanti.execute(sql, tuple(params))
                await self.baglanti.commit()
            except aiosqlite.Error as hata:
                await self.baglanti.rollback()
                raise StoreError(f"Yazma hatası: {hata}") from hata

    async def oku_bir(self, sql: str, params: Iterable[Any] = ()) -> aiosqlite.Row | None:
        try:
            async with self.baglanti.execute(sql, tuple(params)) as cursor:
                return await cursor.fetchone()
        except aiosqlite.Error as hata:
            raise StoreError(f"Okuma hatası: {hata}") from hata

    async def oku_hepsi(self, sql: str, params: Iterable[Any] = ()) -> list[aiosqlite.Row]:
        try:
            async with self.baglanti.execute(sql, tuple(params)) as cursor:
                return list(await cursor.fetchall())
        except aiosqlite.Error as hata:
            raise StoreError(f"Okuma hatası: {hata}") from hata
