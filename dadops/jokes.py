"""Fetching dad jokes and checking that their source answers."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass

import requests

JOKE_URL = "https://icanhazdadjoke.com/"
USER_AGENT = "dadops joke client"
REQUEST_HEADERS = {"Accept": "application/json", "User-Agent": USER_AGENT}
REQUEST_TIMEOUT = 30.0
NOT_REACHABLE = "404 NOK"
_BEER = "\U0001F37A "

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RandomJoke:
    """A joke as the joke API returns it."""

    id: str = ""
    joke: str = ""
    status: int = 0

    @classmethod
    def from_json(cls, data):
        """Build a joke from a JSON document given as text or bytes."""
        payload = json.loads(data)
        if not isinstance(payload, dict):
            raise ValueError("joke payload must be a JSON object")
        joke_id = payload.get("id", "")
        text = payload.get("joke", "")
        status = payload.get("status", 0)
        if not isinstance(joke_id, str):
            raise ValueError("joke field 'id' must be a string")
        if not isinstance(text, str):
            raise ValueError("joke field 'joke' must be a string")
        if isinstance(status, bool) or not isinstance(status, int):
            raise ValueError("joke field 'status' must be an integer")
        return cls(id=joke_id, joke=text, status=status)


def fetch_joke_data(base_api=JOKE_URL):
    """Ask the joke API for a joke and return the raw response body."""
    response = requests.get(base_api, headers=REQUEST_HEADERS, timeout=REQUEST_TIMEOUT)
    try:
        return response.content
    finally:
        response.close()


def get_random_joke(base_api=JOKE_URL):
    """Fetch a joke, print it and return its text."""
    print("Here is your Joke")
    print(f"{_BEER}{_BEER}Beer!!!")
    data = fetch_joke_data(base_api)
    try:
        joke = RandomJoke.from_json(data)
    except ValueError as exc:
        print(f"Could not unmarshal reponseBytes. {exc}")
        joke = RandomJoke()
    print(joke.joke)
    return joke.joke


def verify_url(url):
    """Send a HEAD request to ``url`` and return its status line, or "404 NOK"."""
    try:
        response = requests.head(url, allow_redirects=True, timeout=REQUEST_TIMEOUT)
    except requests.RequestException as exc:
        log.error("Error %s %s", url, exc)
        return NOT_REACHABLE
    status = f"{response.status_code} {response.reason}"
    print(status, url)
    response.close()
    return status