# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from .AuthModels import Session, LoginIstegi, DavetOlusturIstegi, DavetKabulIstegi
