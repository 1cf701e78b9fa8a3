"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts y headers para las peticiones de introspection.
- Facilita testeo: se puede pasar un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

USER_AGENT = "graphql-codegen-cli/0.1"


def build_client(
    *,
    timeout_seconds: float,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` síncrono con defaults para GraphQL."""

    headers: dict[str, str] = {
        "User-Agent": USER_AGENT,
        "Accept": "application/json",
        "Content-Type": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
