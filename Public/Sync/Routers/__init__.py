# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from fastapi import APIRouter

sync_router = APIRouter(prefix="")

from . import ws, room
