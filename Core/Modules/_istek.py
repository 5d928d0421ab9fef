# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from CLI         import konsol, hata
from Core        import kekik_FastAPI, Request, JSONResponse
from time        import time
from user_agents import parse
import asyncio

# Bu yollar loglanmaz (medya aralık istekleri çok sık gelir)
ATLANAN_YOLLAR = ("/media", "/subs", "/favicon.ico", "/api/v1/health")

@kekik_FastAPI.middleware("http")
async def istekten_once_sonra(request: Request, call_next):
    baslangic_zamani = time()

    request.state.veri = dict(request.query_params)

    try:
        ua_header = request.headers.get("User-Agent") or ""
        parsed_ua = parse(ua_header)
        cihaz = ua_header if str(parsed_ua).split("/")[2].strip() == "Other" else str(parsed_ua)
    except Exception:
        cihaz = request.headers.get("User-Agent")

    fw_for    = request.headers.get("X-Forwarded-For")
    client_ip = fw_for.split(",")[0].strip() if fw_for else (request.client.host if request.client else "-")

    log_veri = {
        "method" : request.method,
        "url"    : str(request.url).rstrip("?").split("?")[0],
        "veri"   : request.state.veri,
        "kod"    : None,
        "sure"   : None,
        "ip"     : client_ip,
        "cihaz"  : cihaz,
    }

    try:
        response = await asyncio.wait_for(call_next(request), timeout=30)
        log_veri["kod"] = response.status_code
    except asyncio.TimeoutError:
        log_veri["kod"] = 504
        response        = JSONResponse(status_code=504, content={"error": "Zaman Aşımı.."})
        hata(f"⏱️ Timeout: {request.url.path}")
    except asyncio.CancelledError:
        konsol.log(f"[yellow]🚫 İstemci bağlantıyı kapattı:[/] {request.url.path}")
        raise

    if request.url.path.startswith(ATLANAN_YOLLAR):
        return response

    log_veri["sure"] = round(time() - baslangic_zamani, 2)
    log_salla(log_veri)

    return response

def log_salla(log_veri: dict):
    LABEL_WIDTH  = 5
    durum_label  = f"[green]{'durum':<{LABEL_WIDTH}}:[/]"
    ip_label     = f"[green]{'ip':<{LABEL_WIDTH}}:[/]"
    cihaz_label  = f"[green]{'cihaz':<{LABEL_WIDTH}}:[/]"

    log_lines = [f"[bold blue]»[/] [bold turquoise2]{log_veri['url']}[/]"]

    if log_veri["veri"]:
        log_lines.append(f"[bold magenta]»[/] [bold cyan]{log_veri['veri']}[/]")

    log_lines.append(
        f"  {durum_label} [bold green]{log_veri['method']}[/]"
        f" [blue]-[/] [bold bright_yellow]{log_veri['kod']}[/]"
        f" [blue]-[/] [bold yellow2]{log_veri['sure']} sn[/]"
    )
    log_lines.append(f"  {ip_label} [bold red]{log_veri['ip']}[/]")
    log_lines.append(f"  {cihaz_label} [magenta]{log_veri['cihaz']}[/]")

    konsol.log("\n".join(log_lines) + "\n")
