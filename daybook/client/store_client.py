"""
Remote store client
Talks to the JSON document store over REST: GET/POST/PUT/DELETE {base_url}/{path}.json
"""

from typing import Dict, Any, Optional
import httpx
from daybook.utils.config import settings
from daybook.utils.logger import logger


class StoreClient:
    """JSON document store client

    Every call opens its own connection and turns transport failures into
    None / False after logging them, so callers treat them as "no data".
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Initialise the client

        Args:
            base_url: store root URL, defaults to settings.store_base_url
            timeout: request timeout in seconds
            transport: custom httpx transport (tests use httpx.MockTransport)
        """
        self.base_url = (base_url if base_url is not None else settings.store_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.store_timeout
        self._transport = transport

    def is_configured(self) -> bool:
        """Whether a store URL has been configured"""
        return bool(self.base_url)

    def _url(self, path: str) -> str:
        return self.base_url + "/" + path.strip("/") + ".json"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    async def get(self, path: str) -> Optional[Dict[str, Any]]:
        """
        Read a path

        Args:
            path: collection name or collection/id

        Returns:
            the JSON body (id -> record mapping for a collection), None on failure or empty path
        """
        try:
            async with self._client() as client:
                response = await client.get(self._url(path))

                if response.status_code != 200:
                    logger.error(f"Store GET {path} failed: {response.status_code}")
                    return None

                return response.json()

        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Store GET {path} error: {e}")
            return None

    async def post(self, path: str, record: Dict[str, Any]) -> Optional[str]:
        """
        Insert a record into a collection; the store assigns the id

        Args:
            path: collection name
            record: record body

        Returns:
            the generated id, None on failure
        """
        try:
            async with self._client() as client:
                response = await client.post(self._url(path), json=record)

                if response.status_code != 200:
                    logger.error(f"Store POST {path} failed: {response.status_code}")
                    return None

                result = response.json()
                if not isinstance(result, dict) or not result.get("name"):
                    logger.error(f"Store POST {path} returned no id: {result}")
                    return None

                return result["name"]

        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Store POST {path} error: {e}")
            return None

    async def put(self, path: str, record: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Overwrite the full record at an id-scoped path

        Args:
            path: collection/id
            record: complete record body

        Returns:
            the stored record, None on failure
        """
        try:
            async with self._client() as client:
                response = await client.put(self._url(path), json=record)

                if response.status_code != 200:
                    logger.error(f"Store PUT {path} failed: {response.status_code}")
                    return None

                return response.json()

        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Store PUT {path} error: {e}")
            return None

    async def delete(self, path: str) -> bool:
        """
        Delete the record at an id-scoped path

        Args:
            path: collection/id

        Returns:
            whether the store accepted the delete
        """
        try:
            async with self._client() as client:
                response = await client.delete(self._url(path))
                if response.status_code != 200:
                    logger.error(f"Store DELETE {path} failed: {response.status_code}")
                    return False
                return True

        except httpx.HTTPError as e:
            logger.error(f"Store DELETE {path} error: {e}")
            return False


store_client = StoreClient()
