"""HTTP client for the assignment hint service."""

from __future__ import annotations

import logging
import re
from typing import Any
from urllib.parse import quote

import httpx

from assist_engine.errors import HintServiceError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Prompt injection sanitization
# ---------------------------------------------------------------------------

_PROMPT_INJECTION_PATTERNS = re.compile(
    r"<\|system\|>|<\|user\|>|<\|assistant\|>|"
    r"Human:|Assistant:|"
    r"\[INST\]|\[/INST\]|"
    r"<<SYS>>|<</SYS>>|"
    r"<\|im_start\|>|<\|im_end\|>",
    re.IGNORECASE,
)
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")  # Keep \n, \t, \r
_MAX_QUERY_SIZE = 20 * 1024


def sanitize_query(value: str) -> str:
    """Clean learner query text before it is forwarded to the hint model.

    Strips control characters (preserving newlines and tabs), replaces known
    prompt role/delimiter markers, and truncates oversized input.
    """
    cleaned = _CONTROL_CHARS.sub("", value)
    cleaned = _PROMPT_INJECTION_PATTERNS.sub("[FILTERED]", cleaned)
    if len(cleaned) > _MAX_QUERY_SIZE:
        cleaned = cleaned[:_MAX_QUERY_SIZE] + f"\n[TRUNCATED: query exceeded {_MAX_QUERY_SIZE} bytes]"
    return cleaned


class HintServiceClient:
    """Thin async wrapper around the hint endpoint.

    Unlike the orchestrator, this client does not degrade silently: every
    failure is raised as :class:`HintServiceError` so the caller decides how
    to fall back.

    Parameters
    ----------
    base_url:
        Root URL of the backend API (e.g. ``http://localhost:5000/api``).
    timeout:
        Per-request timeout in seconds.
    api_token:
        Optional bearer token sent with every request.
    client:
        Pre-built ``httpx.AsyncClient``; mainly for tests with a mock
        transport.  When given, ``base_url`` is still used to build paths.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        api_token: str | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")

        default_headers: dict[str, str] = {"Content-Type": "application/json"}
        if api_token:
            default_headers["Authorization"] = f"Bearer {api_token}"

        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            headers=default_headers,
        )
        self._headers = default_headers

    @property
    def base_url(self) -> str:
        return self._base_url

    def hint_url(self, assignment_id: str) -> str:
        return f"{self._base_url}/hint/assignment/{quote(assignment_id, safe='')}"

    async def get_hint(self, assignment_id: str, query: str) -> str:
        """Request a hint for *query* within *assignment_id*.

        Calls ``POST /hint/assignment/{assignment_id}`` with
        ``{"userQuery": query}`` and expects ``{"success": true, "hint": "..."}``.

        Raises
        ------
        HintServiceError
            On transport errors, non-2xx responses, malformed bodies, or a
            response whose ``success`` flag is not true.
        """
        payload = {"userQuery": sanitize_query(query)}
        body = await self._post(self.hint_url(assignment_id), payload)

        if body.get("success") is not True:
            raise HintServiceError("Hint service reported failure")
        hint = body.get("hint")
        if not isinstance(hint, str) or not hint.strip():
            raise HintServiceError("Hint service returned no hint text")
        return hint

    async def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._client.aclose()

    async def __aenter__(self) -> HintServiceClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    # -- Internal helpers ----------------------------------------------------

    async def _post(self, url: str, payload: dict[str, Any]) -> dict[str, Any]:
        try:
            response = await self._client.post(url, json=payload, headers=self._headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "Hint service returned %d for %s: %s",
                exc.response.status_code,
                url,
                exc.response.text[:500],
            )
            raise HintServiceError(
                f"Hint service returned {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.RequestError as exc:
            logger.warning("Hint service request to %s failed: %s", url, str(exc))
            raise HintServiceError(f"Hint service request failed: {exc}") from exc

        try:
            body = response.json()
        except ValueError as exc:
            raise HintServiceError("Hint service returned a non-JSON body") from exc
        if not isinstance(body, dict):
            raise HintServiceError("Hint service returned an unexpected body")
        return body
