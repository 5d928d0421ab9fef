# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from fastapi import APIRouter

auth_router = APIRouter(prefix="/api")

from . import oturum, davet
