# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from .SyncModels import RoomState, Action, ACTION_KINDS, iso_zaman, sonlu_sayi
