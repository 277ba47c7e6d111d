# backend/app/utils/api_client.py
"""
Post-deploy smoke check.

Probes a running myservice and confirms it is alive and serving the
expected build, e.g. after pushing 0.2.0 to an environment.
"""
import requests

API_BASE = "http://localhost:8080"


class APIClient:
    def __init__(self, base_url: str = API_BASE, timeout: int = 5):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    # -------------------------------
    # Simple helper for handling errors
    # -------------------------------
    def _get_text(self, path: str) -> str:
        url = f"{self.base_url}{path}"
        try:
            r = requests.get(url, timeout=self.timeout)
            r.raise_for_status()
        except requests.RequestException as e:
            raise RuntimeError(f"API request failed: {e}")
        return r.text

    def root(self) -> str:
        return self._get_text("/")

    def health(self) -> str:
        return self._get_text("/health")

    def version(self) -> str:
        return self._get_text("/version")

    def deployed_version(self) -> str:
        body = self.version().strip()
        prefix, _, number = body.partition(" ")
        if prefix != "version" or not number:
            raise RuntimeError(f"Unexpected /version body: {body!r}")
        return number

    def check_deployment(self, expected_version: str) -> None:
        """Raise RuntimeError unless /health is ok and /version matches."""
        status = self.health()
        if status != "ok\n":
            raise RuntimeError(f"Service unhealthy: {status!r}")
        deployed = self.deployed_version()
        if deployed != expected_version:
            raise RuntimeError(
                f"Version mismatch: expected {expected_version}, got {deployed}"
            )
