"""Thin client for the Remotive remote-jobs API proxied by /api/external-jobs."""

from __future__ import annotations

import html
import re
from typing import Any, Dict, List, Optional

import requests

from jobportal.exceptions import NetworkError, UpstreamError
from jobportal.simple_logger import get_logger

logger = get_logger("external_jobs")

DEFAULT_API_URL = "https://remotive.com/api/remote-jobs"
SNIPPET_LENGTH = 200

_TAG_RE = re.compile(r"<[^>]+>")
_WS_RE = re.compile(r"\s+")


def make_snippet(description: Optional[str], length: int = SNIPPET_LENGTH) -> str:
    """Strip HTML from a job description and cut it to a short preview."""
    text = html.unescape(_TAG_RE.sub(" ", description or ""))
    text = _WS_RE.sub(" ", text).strip()
    if len(text) <= length:
        return text
    return text[:length].rstrip() + "..."


def normalize_job(item: Dict[str, Any]) -> Dict[str, Any]:
    """Map one Remotive listing onto the shape the dashboard renders."""
    job_type = item.get("job_type") or ""
    return {
        "id": item.get("id"),
        "title": item.get("title") or "",
        "company": item.get("company_name") or "",
        "jobType": job_type.replace("_", " ").title() if job_type else None,
        "candidateLocation": item.get("candidate_required_location") or None,
        "salary": item.get("salary") or None,
        "category": item.get("category") or None,
        "publicationDate": item.get("publication_date") or None,
        "url": item.get("url"),
        "descriptionSnippet": make_snippet(item.get("description")),
    }


class RemotiveClient:
    """Read-only client for the Remotive listing API."""

    def __init__(self, api_url: str = DEFAULT_API_URL, limit: int = 30, timeout: float = 10):
        self.api_url = api_url
        self.limit = limit
        self.timeout = timeout

    @classmethod
    def from_config(cls, config) -> "RemotiveClient":
        return cls(
            api_url=config.get("EXTERNAL_JOBS_API_URL", DEFAULT_API_URL),
            limit=config.get("EXTERNAL_JOBS_LIMIT", 30),
            timeout=config.get("EXTERNAL_JOBS_TIMEOUT", 10),
        )

    def search(self, term: str = "") -> List[Dict[str, Any]]:
        params: Dict[str, Any] = {"limit": self.limit}
        term = (term or "").strip()
        if term:
            params["search"] = term

        try:
            response = requests.get(
                self.api_url,
                params=params,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        except (requests.ConnectionError, requests.Timeout) as exc:
            logger.error("External jobs API unreachable: %s", exc)
            raise NetworkError("External job source is not reachable. Please try again later.") from exc
        except requests.RequestException as exc:
            logger.error("External jobs request failed: %s", exc)
            raise UpstreamError("Failed to load external jobs.") from exc

        if response.status_code >= 400:
            logger.error("External jobs API returned HTTP %s", response.status_code)
            raise UpstreamError(f"External job source returned HTTP {response.status_code}")

        try:
            payload = response.json()
        except ValueError as exc:
            logger.error("External jobs API returned invalid JSON")
            raise UpstreamError("External job source returned an invalid response") from exc

        items = payload.get("jobs") if isinstance(payload, dict) else None
        if not isinstance(items, list):
            raise UpstreamError("External job source returned an invalid response")

        jobs = [normalize_job(item) for item in items[: self.limit] if isinstance(item, dict)]
        logger.info("Fetched %d external jobs (search=%r)", len(jobs), term)
        return jobs
