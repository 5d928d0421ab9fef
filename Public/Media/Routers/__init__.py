# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from fastapi import APIRouter

media_router = APIRouter(prefix="")

from . import media, subs, library
