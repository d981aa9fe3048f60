"""HTTP client for the League of Legends Live Client Data API.

The game serves this API on https://127.0.0.1:2999 only while a match is
running, behind a self-signed certificate. Connection failures are the
normal state outside of a game, so they are raised as
LiveClientUnavailable and only logged at debug level.
"""

import ipaddress
import logging
import ssl
from typing import Any, Optional
from urllib.parse import urlsplit

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://127.0.0.1:2999"


class LiveClientError(Exception):
    """Base error for everything the live client can fail with."""


class LiveClientUnavailable(LiveClientError):
    """The endpoint could not be reached or did not answer with JSON."""


def _is_loopback(base_url: str) -> bool:
    host = urlsplit(base_url).hostname or ""
    if host == "localhost":
        return True
    try:
        return ipaddress.ip_address(host).is_loopback
    except ValueError:
        return False


class LiveClientAPI:
    """Async reader for the four liveclientdata endpoints we consume."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 5.0,
        ca_bundle: str = "",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            base_url: Address of the game's local API
            timeout: Request timeout in seconds
            ca_bundle: Optional path to Riot's root certificate
            transport: Custom httpx transport (tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.ca_bundle = ca_bundle
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _verify(self) -> ssl.SSLContext | bool:
        """TLS verification for this client only.

        The game's certificate is not issued for 127.0.0.1, so loopback
        connections either skip verification or check the chain against
        Riot's root without hostname matching. Non-loopback hosts keep
        httpx's default verification.
        """
        if not _is_loopback(self.base_url):
            return True
        if not self.ca_bundle:
            return False
        context = ssl.create_default_context(cafile=self.ca_bundle)
        context.check_hostname = False
        return context

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                verify=self._verify(),
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def _get(self, path: str, params: Optional[dict[str, str]] = None) -> Any:
        client = await self._get_client()
        try:
            response = await client.get(path, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.debug(f"{path} answered {e.response.status_code}")
            raise LiveClientUnavailable(f"{path} answered {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.debug(f"{path} unreachable: {type(e).__name__}: {e}")
            raise LiveClientUnavailable(f"{path} unreachable: {e}") from e
        except ValueError as e:
            logger.debug(f"{path} returned a non-JSON body")
            raise LiveClientUnavailable(f"{path} returned a non-JSON body") from e

    async def get_game_stats(self) -> Any:
        """Game metadata: gameTime, gameMode, mapName, mapNumber."""
        return await self._get("/liveclientdata/gamestats")

    async def get_active_player(self) -> Any:
        """Full data for the locally controlled player."""
        return await self._get("/liveclientdata/activeplayer")

    async def get_player_list(self) -> Any:
        """Scoreboard entries for every participant."""
        return await self._get("/liveclientdata/playerlist")

    async def get_player_items(self, riot_id: str) -> Any:
        """Inventory of the participant identified by riot_id."""
        return await self._get("/liveclientdata/playeritems", params={"riotId": riot_id})
