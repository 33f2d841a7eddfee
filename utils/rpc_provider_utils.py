from urllib.parse import urlparse

from aiohttp import ClientTimeout
from web3 import AsyncHTTPProvider
from web3.providers.async_base import AsyncBaseProvider

from utils.logger_utils import get_logger

logger = get_logger("RPC Provider Utils")

DEFAULT_TIMEOUT = 60


def get_async_provider_from_uri(uri_string: str, timeout: int = DEFAULT_TIMEOUT) -> AsyncBaseProvider:
    """
    Creates an asynchronous Web3 provider based on the URI scheme.
    Currently supports HTTP/HTTPS.
    """
    uri = urlparse(uri_string)

    if uri.scheme == "http" or uri.scheme == "https":
        logger.debug(f"Using async HTTP provider at {uri.netloc}")
        request_kwargs = {"timeout": ClientTimeout(total=timeout)}
        return AsyncHTTPProvider(uri_string, request_kwargs=request_kwargs)
    else:
        raise ValueError(f"Unknown uri scheme {uri_string}. Supported: http, https")
