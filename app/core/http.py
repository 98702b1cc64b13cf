import httpx
from app.core.config import settings

def default_headers() -> dict[str, str]:
    return {
        "User-Agent": settings.USER_AGENT,
        "Accept": "text/csv",
        "Cache-Control": "no-cache",
    }

async def fetch_text(url: str) -> str:
    timeout = httpx.Timeout(settings.FETCH_TIMEOUT_SECONDS)
    async with httpx.AsyncClient(timeout=timeout, headers=default_headers(), follow_redirects=True) as client:
        r = await client.get(url)
        r.raise_for_status()
        r.encoding = "utf-8"
        return r.text
