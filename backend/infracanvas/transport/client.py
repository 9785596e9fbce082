"""
Deploy client - posts compiled payloads to the deployment backend.

Every call rebuilds nothing: it sends the payload it is given. Callers compile
a fresh payload from current graph state right before each action.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
import structlog

from infracanvas import config
from infracanvas.errors import BackendError, ClientSideError
from infracanvas.ir.payload import DeployPayload

log = structlog.get_logger(__name__)


@dataclass
class BackendResponse:
    ok: bool
    status_code: int
    message: Optional[str] = None


def _json_or_none(response: requests.Response) -> Optional[Dict[str, Any]]:
    try:
        data = response.json()
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


def _error_message(response: requests.Response, action: str) -> str:
    data = _json_or_none(response) or {}
    for key in ("detail", "error"):
        value = data.get(key)
        if value:
            return value if isinstance(value, str) else str(value)
    text = (response.text or "").strip()
    if text:
        return text
    return f"{action} failed ({response.status_code})"


class DeployClient:
    def __init__(
        self,
        base_url: str = config.API_BASE,
        timeout: float = config.REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session

    # ---------- AWS ----------

    def aws_compile(self, payload: DeployPayload) -> BackendResponse:
        return self._post("/aws/compile", payload.to_wire(), "Compile")

    def aws_deploy(self, payload: DeployPayload) -> BackendResponse:
        return self._post("/aws/deploy", payload.to_wire(), "Deploy")

    def aws_bootstrap(self, payload: DeployPayload) -> BackendResponse:
        if not (payload.region or "").strip():
            raise ClientSideError("Region is required to bootstrap")
        return self._post("/aws/bootstrap", payload.to_wire(), "Bootstrap")

    def aws_destroy(self) -> BackendResponse:
        return self._post("/aws/destroy", {}, "Destroy")

    # ---------- GCP ----------

    def gcp_up(self, payload: DeployPayload) -> BackendResponse:
        wire = payload.to_wire()
        wire.setdefault("location", payload.region)
        return self._post("/gcp/up", {"ir": wire}, "Deploy")

    def gcp_preview(self, payload: DeployPayload) -> BackendResponse:
        return self._post("/gcp/preview", {"ir": payload.to_wire()}, "Preview")

    def gcp_destroy(self, payload: DeployPayload) -> BackendResponse:
        return self._post("/gcp/destroy", payload.to_wire(), "Destroy")

    # ---------- internals ----------

    def _post(self, path: str, body: Dict[str, Any], action: str) -> BackendResponse:
        url = f"{self.base_url}{path}"
        poster = self.session.post if self.session is not None else requests.post

        log.info("backend_request", action=action, url=url)
        response = poster(url, json=body, timeout=self.timeout)

        if not response.ok:
            message = _error_message(response, action)
            log.warning("backend_error", action=action, status=response.status_code, message=message)
            raise BackendError(message, response.status_code)

        data = _json_or_none(response) or {}
        message = data.get("message") or data.get("output") or data.get("detail")
        log.info("backend_response", action=action, status=response.status_code)
        return BackendResponse(
            ok=True,
            status_code=response.status_code,
            message=None if message is None else str(message),
        )
