# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from .AuthStore import AuthStore, BadRequest, NotFound, rastgele_token
from .guards    import oturum_getir, oturum_gerekli, admin_gerekli, websocket_oturumu
