# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

class SyncError(Exception):
    """Uygulama hatalarının tabanı; `status_code` ile HTTP karşılığını taşır"""
    status_code = 500

    def __init__(self, message: str = "Sunucu Hatası.."):
        super().__init__(message)
        self.message = message

class StoreError(SyncError):
    """Depolama katmanı hatası - o istek için ölümcül, tekrar denenmez"""
    status_code = 500

class AuthError(SyncError):
    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)

class ForbiddenError(SyncError):
    status_code = 403

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message)

class InvalidPathError(SyncError):
    status_code = 403

    def __init__(self, message: str = "Invalid path"):
        super().__init__(message)

class RangeNotSatisfiable(SyncError):
    status_code = 416

    def __init__(self, message: str = "Invalid range"):
        super().__init__(message)
