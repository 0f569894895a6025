"""HTTP client for the quietcut silence service."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import httpx


class ApiError(Exception):
    pass


class ApiClient:
    def __init__(self, base_url: str, *, timeout: float = 60.0, client: Optional[httpx.Client] = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client or httpx.Client(timeout=timeout)

    def _url(self, path: str) -> str:
        if not self.base_url:
            raise ApiError("Server URL missing")
        return f"{self.base_url}{path}"

    def health(self) -> bool:
        try:
            resp = self._client.get(self._url("/healthz"))
            return resp.status_code == 200
        except httpx.HTTPError as exc:
            raise ApiError(str(exc)) from exc

    def analyze(self, file_path: str | Path, min_duration: float | None = None) -> Dict[str, Any]:
        resp = self._post_audio("/v1/analyze", file_path, min_duration)
        try:
            return resp.json()
        except ValueError as exc:
            raise ApiError(f"Invalid response: {exc}") from exc

    def process(
        self,
        file_path: str | Path,
        min_duration: float | None = None,
        output_path: str | Path | None = None,
    ) -> bytes:
        """Upload ``file_path`` and return the cleaned WAV bytes.

        When ``output_path`` is given the bytes are also written there.
        """
        resp = self._post_audio("/v1/process", file_path, min_duration)
        if output_path is not None:
            target = Path(output_path)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(resp.content)
        return resp.content

    def _post_audio(self, path: str, file_path: str | Path, min_duration: float | None) -> httpx.Response:
        payload = {}
        if min_duration is not None:
            payload["min_duration"] = str(min_duration)
        file_path = Path(file_path)
        try:
            with file_path.open("rb") as fh:
                files = {"file": (file_path.name, fh, self._mime_type(file_path))}
                resp = self._client.post(self._url(path), files=files, data=payload)
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise ApiError(f"Request failed: {exc.response.status_code} {self._detail(exc.response)}") from exc
        except (httpx.HTTPError, OSError) as exc:
            raise ApiError(str(exc)) from exc
        return resp

    def _mime_type(self, file_path: Path) -> str:
        suffix = file_path.suffix.lower()
        if suffix == ".flac":
            return "audio/flac"
        if suffix == ".mp3":
            return "audio/mpeg"
        if suffix in {".ogg", ".oga"}:
            return "audio/ogg"
        return "audio/wav"

    @staticmethod
    def _detail(response: httpx.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            return response.text
        if isinstance(data, dict):
            return str(data.get("detail", ""))
        return response.text

    def close(self) -> None:
        self._client.close()
