"""HTTP transport and a small JSON-RPC 2.0 client on top of it."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from typing import Any, Optional, Protocol, Union

CONNECTOR_ERROR = -32003
PARSE_ERROR = -32700
INTERNAL_ERROR = -32603


class JsonRpcError(Exception):
    """A JSON-RPC failure: transport errors, bad responses or errors the server returned."""

    def __init__(self, code: int, message: str, data: Any = None) -> None:
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message
        self.data = data


class Connector(Protocol):
    def send(self, request: str) -> str: ...


class HttpConnector:
    """Posts JSON-RPC requests to ``<host>/rpc``."""

    def __init__(self, host: str, timeout: float = 30.0) -> None:
        if "://" not in host:
            host = "http://" + host
        self.url = host.rstrip("/") + "/rpc"
        self.timeout = timeout

    def send(self, request: Union[str, bytes]) -> str:
        """Send ``request`` and return the response body; raises JsonRpcError on failure."""
        payload = request.encode("utf-8") if isinstance(request, str) else bytes(request)
        http_request = urllib.request.Request(
            self.url,
            data=payload,
            headers={"Content-Type": "application/json"},
            method="POST",
        )
        try:
            with urllib.request.urlopen(http_request, timeout=self.timeout) as response:
                status, reason, body = response.status, response.reason, response.read()
        except urllib.error.HTTPError as exc:
            status, reason, body = exc.code, exc.reason, b""
            exc.close()
        except (urllib.error.URLError, OSError) as exc:
            raise JsonRpcError(CONNECTOR_ERROR, "client connector error, result is Empty!") from exc

        if status != 200:
            raise JsonRpcError(
                CONNECTOR_ERROR,
                f"client connector error, received status != 200, status: {status}, reason: {reason}",
            )
        return body.decode("utf-8")


class JsonRpcClient:
    """Builds JSON-RPC 2.0 requests and unpacks their responses."""

    def __init__(self, connector: Connector, request_id: int = 1) -> None:
        self.connector = connector
        self.request_id = request_id

    def call(self, method: str, params: Optional[Union[dict, list]] = None) -> Any:
        """Call ``method`` with named (dict) or positional (list) parameters; return its result."""
        if params is None:
            params = {}
        if not isinstance(params, (dict, list)):
            raise TypeError("params must be a dict or a list")
        request = {"jsonrpc": "2.0", "id": self.request_id, "method": method, "params": params}
        raw = self.connector.send(json.dumps(request))

        try:
            response = json.loads(raw)
        except (json.JSONDecodeError, TypeError) as exc:
            raise JsonRpcError(PARSE_ERROR, f"invalid JSON response from server: {exc}") from exc
        if not isinstance(response, dict):
            raise JsonRpcError(INTERNAL_ERROR, "invalid server response: not a JSON object")

        if "error" in response and response["error"] is not None:
            error = response["error"]
            if not isinstance(error, dict) or "code" not in error or "message" not in error:
                raise JsonRpcError(INTERNAL_ERROR, "invalid server response: malformed error object")
            raise JsonRpcError(error["code"], error["message"], error.get("data"))
        if "result" in response:
            return response["result"]
        raise JsonRpcError(
            INTERNAL_ERROR, 'invalid server response: neither "result" nor "error" fields found'
        )