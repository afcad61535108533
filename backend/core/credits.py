"""
Credit collaborators - balance repository and tier resolver.

Both live in the credits service. The credits panel receives them injected;
when the service is not configured the null implementations answer None and
the panel renders with zeroed defaults.
"""
from typing import Any, Dict, Optional, Protocol, Union

import httpx

from config import settings
from core.cache import cache_get, cache_set


class CreditRepository(Protocol):
    async def get_balance(self, user_id: int) -> Optional[Dict[str, Any]]: ...


class TierResolver(Protocol):
    async def get_user_tier(self, user_id: int) -> Optional[Union[Dict[str, Any], str]]: ...


class NullCreditRepository:
    async def get_balance(self, user_id: int) -> Optional[Dict[str, Any]]:
        return None


class NullTierResolver:
    async def get_user_tier(self, user_id: int) -> Optional[Union[Dict[str, Any], str]]:
        return None


class _CreditsApiClient:
    """Shared GET helper for the credits REST API."""

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 5.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.transport = transport
        self.timeout = timeout

    async def _get(self, path: str, user_id: int) -> Optional[Dict[str, Any]]:
        cache_key = f"{path}:{user_id}"
        cached = cache_get("credits", cache_key)
        if cached is not None:
            return cached

        headers = {"Authorization": f"Bearer {self.api_key}"} if self.api_key else {}
        try:
            async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
                response = await client.get(
                    f"{self.base_url}{path}",
                    params={"user_id": user_id},
                    headers=headers,
                )
        except httpx.HTTPError as e:
            print(f"[Credits] Request to {path} failed: {e}")
            return None

        if response.status_code != 200:
            print(f"[Credits] {path} returned {response.status_code}")
            return None

        try:
            data = response.json()
        except ValueError as e:
            print(f"[Credits] Invalid JSON from {path}: {e}")
            return None

        cache_set("credits", cache_key, data)
        return data


class HttpCreditRepository(_CreditsApiClient):
    async def get_balance(self, user_id: int) -> Optional[Dict[str, Any]]:
        data = await self._get("/credits/balance", user_id)
        if not isinstance(data, dict):
            return None
        return data.get("balance", data)


class HttpTierResolver(_CreditsApiClient):
    async def get_user_tier(self, user_id: int) -> Optional[Union[Dict[str, Any], str]]:
        data = await self._get("/tier", user_id)
        if not isinstance(data, dict):
            return None
        return data


def get_credit_repository() -> CreditRepository:
    if not settings.credits_api_url:
        return NullCreditRepository()
    return HttpCreditRepository(settings.credits_api_url, settings.credits_api_key)


def get_tier_resolver() -> TierResolver:
    if not settings.credits_api_url:
        return NullTierResolver()
    return HttpTierResolver(settings.credits_api_url, settings.credits_api_key)
