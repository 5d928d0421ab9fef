# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from .RoomStateStore import RoomStateStore, BOS
from .RoomRegistry   import RoomRegistry, RoomChannel
from .SyncHub        import SyncHub
from .protocol       import parse_client_message, state_message, encode, server_time_ms
