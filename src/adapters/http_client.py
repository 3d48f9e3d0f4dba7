"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts y headers para el SDK del proveedor IA.
- Facilita testeo: se puede sustituir por un stub/mocked client.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - El SDK OpenAI acepta un `http_client` propio; así timeouts/User-Agent
      salen de la misma configuración que usa el resto de la app.
    - No se fijan reintentos aquí: cada llamada es de un solo intento.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
    )


async def check_reachable(url: str, settings: AppSettings | None = None) -> tuple[bool, str]:
    """Comprueba conectividad básica contra `url` (usado por `doctor`).

    Cualquier respuesta HTTP cuenta como alcanzable; solo fallan los errores
    de transporte.
    """

    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc) or type(exc).__name__
