"""Station archive client: downloads monthly summary files over HTTP."""

import logging
import time
from pathlib import Path

import httpx

from meteo.config.schema import DEFAULT_ARCHIVE_URL

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "meteo/0.1.0"
RETRYABLE_STATUS = (429, 503)


class ArchiveClient:
    def __init__(
        self,
        base_url: str = DEFAULT_ARCHIVE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        max_retries: int = 3,
        retry_base_delay: float = 5.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_base_delay = retry_base_delay

    def month_url(self, year: int, month: int) -> str:
        return f"{self.base_url}/{year}_{month:02}.txt"

    def fetch_month(self, year: int, month: int) -> str | None:
        """Fetch the raw text of one monthly report.

        Returns None when the archive has no file for that month (404).
        Retries on 503/429 and transport errors with exponential backoff;
        any other HTTP error is raised.
        """
        url = self.month_url(year, month)
        headers = {"User-Agent": self.user_agent, "Accept": "text/plain"}

        attempt = 0
        while True:
            try:
                resp = httpx.get(url, headers=headers, timeout=self.timeout)
            except httpx.RequestError as e:
                if attempt >= self.max_retries:
                    raise
                reason = str(e)
            else:
                if resp.status_code == httpx.codes.NOT_FOUND:
                    return None
                if (
                    resp.status_code not in RETRYABLE_STATUS
                    or attempt >= self.max_retries
                ):
                    resp.raise_for_status()
                    return resp.text
                reason = f"status {resp.status_code}"

            delay = self.retry_base_delay * (2**attempt)
            logger.warning(
                "Archive %s failed (%s), retrying in %.1fs (attempt %d/%d)",
                url, reason, delay, attempt + 1, self.max_retries,
            )
            time.sleep(delay)
            attempt += 1

    def download_range(
        self, start_year: int, end_year: int, dest_dir: str | Path
    ) -> list[Path]:
        """Download every month of the given years into dest_dir.

        Files are named YYYY_MM.txt. Months the archive does not publish are
        skipped; a month that fails to download is logged and skipped.
        """
        dest = Path(dest_dir)
        dest.mkdir(parents=True, exist_ok=True)

        written: list[Path] = []
        for year in range(start_year, end_year + 1):
            for month in range(1, 13):
                try:
                    text = self.fetch_month(year, month)
                except httpx.HTTPError as e:
                    logger.warning(
                        "Could not fetch report for %d/%02d with url %s: %s",
                        year, month, self.month_url(year, month), e,
                    )
                    continue
                if text is None:
                    logger.info("No report published for %d/%02d", year, month)
                    continue

                path = dest / f"{year}_{month:02}.txt"
                path.write_text(text, encoding="utf-8")
                written.append(path)
                logger.info("Wrote report of %d/%02d", year, month)
        return written
