"""
Async client for the Steam Ladder API.

Wraps a shared httpx.AsyncClient that carries the token header, builds
endpoint paths, checks the response status, and validates the body
into the matching contract. One request per call: no retries, no
caching, no rate limiting.
"""

import time
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from steam_ladder import __version__
from steam_ladder.client.endpoints import (
    LadderType,
    Region,
    country_ladder_path,
    profile_path,
    region_ladder_path,
    update_profile_path,
)
from steam_ladder.client.errors import APIError, DecodeError, RateLimitError
from steam_ladder.config import DEFAULT_BASE_URL, SteamLadderConfig, get_settings
from steam_ladder.contracts import Ladder, SteamProfile
from steam_ladder.logger import get_logger

# Type variable for response models
T = TypeVar("T", bound=BaseModel)


class SteamLadderClient:
    """
    Client for the Steam Ladder API.

    Safe to share between concurrent tasks: the only shared state is
    the underlying httpx.AsyncClient.

    Example:
        >>> async with SteamLadderClient("my-api-key") as client:
        ...     profile = await client.get_profile(76561197960287930)
        ...     ladder = await client.get_ladder(LadderType.XP, Region.EUROPE)
        ...     print(profile.steam_user.name, ladder.entries[0].position)
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            api_key: Steam Ladder API key, sent as "Authorization: Token <key>"
            base_url: API root the endpoint paths are appended to
            http_client: Pre-configured transport (the caller keeps ownership)
            timeout: Request timeout in seconds for a client-created
                transport (None = no timeout)
        """
        if not api_key:
            raise ValueError("api_key must not be empty")

        self._base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            headers={
                "User-Agent": f"steam-ladder/{__version__}",
                "Accept": "application/json",
            },
        )
        self._client.headers["Authorization"] = f"Token {api_key}"
        self._logger = get_logger(
            self.__class__.__name__,
            component="client",
            base_url=self._base_url,
        )

    @classmethod
    def from_settings(
        cls,
        config: SteamLadderConfig | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> "SteamLadderClient":
        """
        Build a client from configuration.

        Args:
            config: Steam Ladder configuration (loaded from the environment if None)
            http_client: Pre-configured transport

        Returns:
            SteamLadderClient: Configured client
        """
        config = config or get_settings().steamladder
        return cls(
            config.api_key.get_secret_value(),
            base_url=config.base_url,
            http_client=http_client,
            timeout=config.timeout_seconds,
        )

    @property
    def base_url(self) -> str:
        """API root without trailing slash."""
        return self._base_url

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> "SteamLadderClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    def _build_url(self, path: str) -> str:
        return f"{self._base_url}/{path}"

    async def _request(self, method: str, path: str, model: type[T]) -> T:
        """
        Perform one request and validate the body into `model`.

        Args:
            method: HTTP method (GET, POST)
            path: Endpoint path relative to the base URL
            model: Contract the JSON body must match

        Returns:
            T: Validated record

        Raises:
            RateLimitError: If the API answers 429
            APIError: If the API answers any other non-2xx status
            DecodeError: If the body is not valid JSON or does not match `model`
            httpx.TransportError: On network failures (not wrapped)
        """
        url = self._build_url(path)
        start_time = time.perf_counter()

        self._logger.debug("Making request", method=method, url=url)

        response = await self._client.request(method, url)

        if response.status_code == 429:
            retry_after = response.headers.get("Retry-After")
            self._logger.warning("Rate limited", url=url, retry_after=retry_after)
            raise RateLimitError(
                f"Rate limit exceeded (429) for {method} {url}",
                endpoint=url,
                retry_after=retry_after,
            )

        if not response.is_success:
            self._logger.warning(
                "API returned error status",
                method=method,
                url=url,
                status_code=response.status_code,
            )
            raise APIError(
                f"API error: {response.status_code} for {method} {url}",
                endpoint=url,
                status_code=response.status_code,
            )

        try:
            record = model.model_validate_json(response.content)
        except PydanticValidationError as e:
            self._logger.warning(
                "Response validation failed",
                url=url,
                model=model.__name__,
                errors=e.error_count(),
            )
            raise DecodeError(
                f"Failed to decode {model.__name__} from {url}: {e}",
                endpoint=url,
                status_code=response.status_code,
                original_error=e,
            ) from e

        self._logger.info(
            "Request successful",
            method=method,
            url=url,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        return record

    async def get_profile(self, steam_id64: int) -> SteamProfile:
        """
        Fetch the profile of a Steam user.

        Args:
            steam_id64: 64-bit Steam ID

        Returns:
            SteamProfile: Profile as currently cached by Steam Ladder
        """
        return await self._request("GET", profile_path(steam_id64), SteamProfile)

    async def update_profile(self, steam_id64: int) -> SteamProfile:
        """
        Ask Steam Ladder to refresh a profile and return the refreshed data.

        Args:
            steam_id64: 64-bit Steam ID

        Returns:
            SteamProfile: Refreshed profile
        """
        return await self._request("POST", update_profile_path(steam_id64), SteamProfile)

    async def get_ladder(
        self,
        ladder_type: LadderType,
        region: Region | str = Region.EUROPE,
    ) -> Ladder:
        """
        Fetch a regional or country ladder.

        Args:
            ladder_type: Metric to rank by
            region: A Region, or an ISO 3166-1 alpha-2 country code
                (passed through unchanged)

        Returns:
            Ladder: Leaderboard in API order
        """
        if isinstance(region, Region):
            path = region_ladder_path(ladder_type, region)
        else:
            path = country_ladder_path(ladder_type, region)
        return await self._request("GET", path, Ladder)

    async def get_country_ladder(self, ladder_type: LadderType, country: str) -> Ladder:
        """
        Fetch a country ladder.

        Args:
            ladder_type: Metric to rank by
            country: ISO 3166-1 alpha-2 country code, sent as given

        Returns:
            Ladder: Leaderboard in API order
        """
        return await self._request("GET", country_ladder_path(ladder_type, country), Ladder)
