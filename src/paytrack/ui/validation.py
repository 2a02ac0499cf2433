"""Pre-flight validation for the Streamlit UI.

No ORM, no DB. The UI only needs a reachable backend.
"""
from typing import List

import httpx


def validate_api_url() -> List[str]:
    """Check that API_URL is an absolute http(s) URL."""
    from paytrack.config import settings
    try:
        url = httpx.URL(settings.API_URL)
    except httpx.InvalidURL as e:
        return [f"API_URL is not a valid URL: {e}"]
    if url.scheme not in ("http", "https") or not url.host:
        return [f"API_URL must be an absolute http(s) URL, got {settings.API_URL!r}"]
    return []


def validate_backend_connection() -> List[str]:
    """Validate that the FastAPI backend is reachable."""
    errors = []
    try:
        from paytrack.ui.api_client import PaytrackClient
        client = PaytrackClient()
        client.health()
    except Exception as e:
        errors.append(f"Backend connection failed: {e}")
    return errors


def run_all_checks() -> List[str]:
    """Run all validation checks; skip the connection test when the URL is unusable."""
    errors = validate_api_url()
    if not errors:
        errors.extend(validate_backend_connection())
    return errors
