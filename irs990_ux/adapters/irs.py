"""
IRS Adapter

Implements ReturnFetcher port against the public IRS 990 bucket on AWS.
One GET per return, no retries.
"""
import logging
from typing import Optional

import httpx

from ..core.errors import FetchError
from ..core.ports import ReturnFetcher
from .filesystem import IRS_EXTENSION

logger = logging.getLogger(__name__)

IRS_AWS_URL = "https://s3.amazonaws.com/irs-form-990/"


class IRSAdapter(ReturnFetcher):
    """Downloads 990 return XML by object id"""

    def __init__(
        self,
        base_url: str = IRS_AWS_URL,
        extension: str = IRS_EXTENSION,
        client: Optional[httpx.Client] = None
    ):
        self.base_url = base_url
        self.extension = extension
        self._client = client

    @property
    def client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client()
        return self._client

    def url_for(self, object_id: str) -> str:
        return f"{self.base_url}{object_id}{self.extension}"

    def fetch(self, object_id: str) -> bytes:
        """Download raw return XML, raise FetchError on any failure"""
        url = self.url_for(object_id)
        try:
            response = self.client.get(url)
        except httpx.HTTPError as e:
            raise FetchError(object_id, None, f"{type(e).__name__}: {e}") from e

        if response.status_code != httpx.codes.OK:
            raise FetchError(object_id, response.status_code)

        return response.content

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
