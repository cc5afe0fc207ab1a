"""Helper functions to talk to the FastAPI backend."""
from __future__ import annotations

import os
from typing import Any, Dict, List

import httpx
from dotenv import load_dotenv

load_dotenv()

API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "8000"))
API_BASE = os.getenv("SLEEPSCREEN_API_BASE", f"http://{API_HOST}:{API_PORT}")
TIMEOUT_S = float(os.getenv("API_TIMEOUT_S", "15"))


async def _post(path: str, json_data: Dict[str, Any]) -> Dict[str, Any]:
    async with httpx.AsyncClient(timeout=TIMEOUT_S) as client:
        response = await client.post(f"{API_BASE}{path}", json=json_data)
        response.raise_for_status()
        return response.json()


async def _get(path: str, params: Dict[str, Any] | None = None) -> Any:
    async with httpx.AsyncClient(timeout=TIMEOUT_S) as client:
        response = await client.get(f"{API_BASE}{path}", params=params)
        response.raise_for_status()
        return response.json()


async def get_practice() -> Dict[str, Any]:
    return await _get("/api/practice")


async def list_questions() -> List[Dict[str, Any]]:
    return await _get("/api/survey/questions")


async def submit_survey(payload: Dict[str, Any]) -> Dict[str, Any]:
    return await _post("/api/survey/submit", payload)


def error_detail(exc: httpx.HTTPError) -> str:
    """Best-effort human readable message for a failed API call."""

    if isinstance(exc, httpx.HTTPStatusError):
        try:
            detail = exc.response.json().get("detail")
        except ValueError:
            detail = None
        if isinstance(detail, str):
            return detail
        return f"Request failed with status {exc.response.status_code}"
    return f"Could not reach the screening API at {API_BASE}"
