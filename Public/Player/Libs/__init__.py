# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from .Reconciler import Reconciler, MediaElement, MediaError, Faz, hedef_konum, duzeltme_gerekli, DRIFT_TOLERANCE, ECHO_SUPPRESSION
from .subtitles  import SubtitleStage, tercih_edilen, DISCOVERY_DEBOUNCE
