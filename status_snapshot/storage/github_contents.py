"""
Minimal GitHub contents API client used to publish snapshots.
"""

from __future__ import annotations

import base64
import logging
from typing import Any

import requests

from status_snapshot.config import RemoteStoreSettings
from status_snapshot.errors import RemoteNotFoundError, RemoteStoreError, RevisionConflictError

logger = logging.getLogger(__name__)

GITHUB_API_VERSION = "2022-11-28"


class GitHubContentsClient:
    """
    Read revision ids and create or update single files in one repository.
    """

    def __init__(
        self,
        *,
        settings: RemoteStoreSettings,
        session: requests.Session | None = None,
    ) -> None:
        self._owner, self._repo = settings.owner_and_repo()
        self._api_url = settings.api_url.rstrip("/")
        self._branch = settings.branch
        self._timeout_seconds = settings.timeout_seconds
        self._session = session or requests.Session()
        self._headers = {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {settings.token}",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }

    @property
    def repository(self) -> str:
        return f"{self._owner}/{self._repo}"

    def get_file_sha(self, path: str) -> str:
        """
        Return the current blob sha of `path`.

        Raises RemoteNotFoundError when the file does not exist yet.
        """

        params = {"ref": self._branch} if self._branch else None
        payload = self._request_json(method="GET", path=path, params=params)
        sha = payload.get("sha") if isinstance(payload, dict) else None
        if not isinstance(sha, str) or not sha:
            raise RemoteStoreError(f"{self.repository}: no sha returned for '{path}'.")
        return sha

    def put_file(
        self,
        path: str,
        *,
        content: str,
        message: str,
        sha: str | None = None,
    ) -> dict[str, Any]:
        """
        Create `path`, or update it when `sha` names the revision being replaced.
        """

        body: dict[str, Any] = {
            "message": message,
            "content": base64.b64encode(content.encode("utf-8")).decode("ascii"),
        }
        if sha is not None:
            body["sha"] = sha
        if self._branch:
            body["branch"] = self._branch
        payload = self._request_json(method="PUT", path=path, json_body=body)
        return payload if isinstance(payload, dict) else {}

    def _request_json(
        self,
        *,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> Any:
        url = f"{self._api_url}/repos/{self._owner}/{self._repo}/contents/{path.lstrip('/')}"
        try:
            response = self._session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=self._headers,
                timeout=self._timeout_seconds,
            )
        except requests.RequestException as exc:
            raise RemoteStoreError(f"{self.repository}: {method} {path} failed: {exc}") from exc

        status_code = response.status_code
        if status_code == 404:
            raise RemoteNotFoundError(
                f"{self.repository}: '{path}' not found.",
                status_code=status_code,
            )
        if status_code == 409 and method == "PUT":
            raise RevisionConflictError(
                f"{self.repository}: '{path}' changed since its sha was read.",
                status_code=status_code,
            )
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            logger.error(
                "GitHub contents request failed repository=%s method=%s status=%s path=%s",
                self.repository,
                method,
                status_code,
                path,
            )
            raise RemoteStoreError(
                f"{self.repository}: {method} {path} returned status {status_code}.",
                status_code=status_code,
            ) from exc

        try:
            return response.json()
        except ValueError as exc:
            raise RemoteStoreError(f"{self.repository}: response was not valid JSON.") from exc
