"""
Request utility for Messenger Send Methods SDK.

Builds Graph API request options, attaches the access token and proxy, and
performs the HTTP call. Every call produces a ``concurrent.futures.Future``;
callback-style callers are served by an adapter over that Future.
"""

import copy
import logging
from concurrent.futures import Executor, Future
from typing import Any, Callable, Dict, Mapping, Optional, Union

import requests

from .constants import DEFAULT_API_VERSION, GRAPH_BASE_URL, ErrorMessages
from .exceptions import (
    APIError,
    NetworkError,
    ProxyConfigError,
    create_exception_from_response
)
from .models import ProxyData, RequestData, RequestOptions

# Set up logging
logger = logging.getLogger(__name__)

Callback = Callable[[Optional[Exception], Optional[Dict[str, Any]]], Any]


class RequestUtility:
    """
    Owns the base request options and performs Send API calls.

    One instance may be shared by several clients; ``set_api_version`` then
    affects all of them.

    Example:
        utility = RequestUtility(api_version="3.1")
        options = utility.get_request_options()
        options.url += "me/messages"
        options.method = "POST"
        options.json = {"recipient": {"id": "123"}, "sender_action": "mark_seen"}
        body = utility.send_message(options, RequestData(token="...")).result()
    """

    def __init__(
        self,
        api_version: str = DEFAULT_API_VERSION,
        executor: Optional[Executor] = None,
        timeout: Optional[float] = None,
        enable_logging: bool = True
    ):
        """
        Initialize the request utility.

        Args:
            api_version: Graph API version, without the leading "v"
            executor: Run calls on this executor instead of the caller's thread
            timeout: Request timeout in seconds (None leaves the transport default)
            enable_logging: Enable request/response logging
        """
        self._request_options = RequestOptions(url=GRAPH_BASE_URL.format(version=api_version))
        self.executor = executor
        self.timeout = timeout
        self.enable_logging = enable_logging

    @property
    def base_url(self) -> str:
        return self._request_options.url

    def set_api_version(self, version: str) -> None:
        """Point every subsequent request at another Graph API version."""
        self._request_options.url = GRAPH_BASE_URL.format(version=version)

    def get_request_options(self) -> RequestOptions:
        """Return an independent copy of the base request options."""
        return copy.deepcopy(self._request_options)

    @staticmethod
    def get_proxy_data(
        request_data: RequestData,
        proxy_data: Optional[Union[ProxyData, Mapping[str, Any]]] = None
    ) -> RequestData:
        """
        Attach a normalised proxy URL to the request data.

        Args:
            request_data: Request data to update
            proxy_data: ProxyData or mapping with ``hostname`` and ``port``

        Returns:
            The updated request data

        Raises:
            ProxyConfigError: If the descriptor lacks hostname or port
        """
        if proxy_data is None:
            return request_data

        if isinstance(proxy_data, ProxyData):
            hostname, port = proxy_data.hostname, proxy_data.port
        elif isinstance(proxy_data, Mapping) and "hostname" in proxy_data and "port" in proxy_data:
            hostname, port = proxy_data["hostname"], proxy_data["port"]
        else:
            raise ProxyConfigError(ErrorMessages.INVALID_PROXY, field="proxy", value=proxy_data)

        if hostname is None or port is None:
            raise ProxyConfigError(ErrorMessages.INVALID_PROXY, field="proxy", value=proxy_data)

        hostname = str(hostname)
        if hostname.startswith("http"):
            request_data.proxy = f"{hostname}:{port}"
        else:
            request_data.proxy = f"http://{hostname}:{port}"

        return request_data

    def send_message(
        self,
        options: RequestOptions,
        request_data: RequestData,
        callback: Optional[Callback] = None
    ) -> "Future[Dict[str, Any]]":
        """
        Send a request to the Graph API.

        Args:
            options: Request options (from get_request_options)
            request_data: Access token and optional proxy
            callback: Optional ``callback(error, body)`` invoked on completion.
                Without an executor it runs before this method returns and
                anything it raises propagates to the caller; with an executor
                it runs as a Future done-callback on the worker thread.

        Returns:
            Future resolving with the parsed response body, or failing with
            a MessengerError subclass
        """
        options.qs["access_token"] = request_data.token
        if request_data.proxy:
            options.proxy = request_data.proxy

        if self.executor is not None:
            future = self.executor.submit(self._perform_request, options)
            if callback is not None:
                future.add_done_callback(_callback_adapter(callback))
            return future

        future = Future()
        try:
            future.set_result(self._perform_request(options))
        except Exception as e:
            future.set_exception(e)

        if callback is not None:
            _callback_adapter(callback)(future)

        return future

    def _perform_request(self, options: RequestOptions) -> Dict[str, Any]:
        """
        Perform the HTTP call and normalise the response body.

        Raises:
            NetworkError: On transport failure
            MessengerError: On a platform-reported error or unreadable body
        """
        if self.enable_logging:
            logger.info(f"Making {options.method} request to {options.url}")
            if options.json:
                logger.debug(f"Request payload: {options.json}")

        try:
            response = requests.request(**options.to_request_kwargs(self.timeout))
        except requests.exceptions.RequestException as e:
            logger.error(f"Request to {options.url} failed: {e}")
            raise NetworkError(ErrorMessages.NETWORK_ERROR.format(error=e)) from e

        if self.enable_logging:
            logger.info(f"Response status: {response.status_code}")

        body = _parse_body(response)

        if "error" in body or response.status_code >= 400:
            error = create_exception_from_response(response.status_code, body)
            logger.error(f"Send API error: {error}")
            raise error

        return body


def _parse_body(response: requests.Response) -> Dict[str, Any]:
    """Return the response body parsed into a dict."""
    try:
        body = response.json()
    except ValueError:
        raise APIError(
            ErrorMessages.INVALID_RESPONSE_BODY,
            status_code=response.status_code,
            details={"body": response.text}
        )

    if not isinstance(body, dict):
        raise APIError(
            ErrorMessages.INVALID_RESPONSE_BODY,
            status_code=response.status_code,
            details={"body": body}
        )
    return body


def _callback_adapter(callback: Callback) -> Callable[["Future[Dict[str, Any]]"], None]:
    """Translate a completed Future into ``callback(error, body)``."""

    def _on_done(future: "Future[Dict[str, Any]]") -> None:
        error = future.exception()
        if error is not None:
            callback(error, None)
        else:
            callback(None, future.result())

    return _on_done
