"""Command-line helper to fetch a random Chuck Norris fact or the category list."""

import sys
from typing import Any, Dict

import requests

from app.config import settings

CATEGORIES_URL = f"{settings.api_base_url}/jokes/categories"
RANDOM_URL = f"{settings.api_base_url}/jokes/random"


def fetch_random_joke(category: str = "") -> Dict[str, Any]:
    """Call the public API and extract the fact text and its categories."""
    try:
        response = requests.get(RANDOM_URL, params={"category": category}, timeout=settings.request_timeout)
        response.raise_for_status()
        joke_data = response.json()
        return {
            "value": joke_data.get("value", "No fact found."),
            "categories": joke_data.get("categories", []),
        }
    except requests.RequestException as exc:
        return {"error": str(exc)}


def fetch_categories() -> Dict[str, Any]:
    try:
        response = requests.get(CATEGORIES_URL, timeout=settings.request_timeout)
        response.raise_for_status()
        return {"categories": response.json()}
    except requests.RequestException as exc:
        return {"error": str(exc)}


if __name__ == "__main__":
    args = sys.argv[1:]
    if args[:1] == ["--categories"]:
        print(fetch_categories())
    else:
        print(fetch_random_joke(args[0] if args else ""))
