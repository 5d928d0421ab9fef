# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from .Hatalar  import SyncError, StoreError, AuthError, ForbiddenError, InvalidPathError, RangeNotSatisfiable
from .Database import VeriTabani
