"""Shared HTTP transport utilities for the ledger REST adapter.

This module provides a thin wrapper around ``requests.Session`` so the adapter
shares one timeout policy and one way of turning transport failures into
typed errors.

Dependencies:
    - ``requests`` for network I/O.
    - ``ledgerdash.adapters.api_errors.ApiTransportError`` for typed transport
      failures.

Call context:
    - Constructed by ``ledgerdash/adapters/ledger_rest.py``.
    - Used only inside adapter layer methods; use cases interact through ports.

Requests are sent exactly once. A failed attempt surfaces immediately and the
user re-triggers the operation from the dashboard.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from requests import exceptions as req_exc

from ledgerdash.adapters.api_errors import ApiTransportError

LOGGER = logging.getLogger(__name__)


@dataclass
class HttpConfig:
    """Timeout configuration for adapter HTTP calls.

    Attributes:
        request_timeout_s: Timeout in seconds for JSON API calls.
    """
    request_timeout_s: float = 10


class JsonSession:
    """Shared requests wrapper with JSON headers and transport error mapping.

    This class is intentionally transport-only. Callers provide endpoint URLs and
    decide how to map non-2xx responses into use-case errors.
    """

    def __init__(self, cfg: HttpConfig) -> None:
        """Create a session.

        Args:
            cfg: Shared timeout settings.

        Side Effects:
            Creates a persistent ``requests.Session`` object.
        """
        self.session = requests.Session()
        self.cfg = cfg

    @staticmethod
    def _headers(json_body: bool = False) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers

    def get(self, url: str, *, timeout: Optional[float] = None) -> requests.Response:
        """Send a GET request.

        Raises:
            ApiTransportError: If the request fails before a response arrives.

        Call Chain:
            Adapter methods -> ``JsonSession.get`` -> ``requests.Session.get``.
        """
        context = f"GET {url}"
        LOGGER.debug(context)
        try:
            return self.session.get(
                url,
                headers=self._headers(),
                timeout=timeout or self.cfg.request_timeout_s,
            )
        except (req_exc.Timeout, req_exc.ConnectionError) as exc:
            raise ApiTransportError(f"Could not reach {url}", context=context) from exc
        except req_exc.RequestException as exc:
            raise ApiTransportError(str(exc), context=context) from exc

    def post(
        self,
        url: str,
        *,
        json_body: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> requests.Response:
        """Send a JSON POST request.

        Raises:
            ApiTransportError: If the request fails before a response arrives.

        Side Effects:
            Serializes ``json_body`` with ``json.dumps`` before sending.
        """
        context = f"POST {url}"
        LOGGER.debug(context)
        data = None if json_body is None else json.dumps(json_body)
        try:
            return self.session.post(
                url,
                data=data,
                headers=self._headers(json_body=json_body is not None),
                timeout=timeout or self.cfg.request_timeout_s,
            )
        except (req_exc.Timeout, req_exc.ConnectionError) as exc:
            raise ApiTransportError(f"Could not reach {url}", context=context) from exc
        except req_exc.RequestException as exc:
            raise ApiTransportError(str(exc), context=context) from exc


__all__ = ["HttpConfig", "JsonSession"]
