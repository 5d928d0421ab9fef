# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from .library import guvenli_yol, video_dosyalari, altyazi_izleri, etiket
from .ranges  import aralik_coz, dosya_parcasi
