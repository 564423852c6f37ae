"""Client for the text-to-image endpoint of an image generation server."""

from __future__ import annotations

import base64
import binascii
import ipaddress
import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from dataclasses import dataclass, field
from typing import List

from gotkit.sdconfig import (
    RequestNotOKError,
    ServerNotAvailableError,
    ServerNotConfiguredError,
    StableDiffusionConfig,
    StableDiffusionRequest,
)

logger = logging.getLogger(__name__)

TXT2IMG_PATH = "/sdapi/v1/txt2img"
DEFAULT_TIMEOUT = 180.0


@dataclass
class StableDiffusionResponse:
    """The images, base64 encoded, returned by the server."""

    images: List[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, text: str) -> "StableDiffusionResponse":
        """Parse a response body; raise ValueError if it is not valid."""
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("response must be a JSON object")
        images = data.get("images") or []
        if not isinstance(images, list) or not all(isinstance(i, str) for i in images):
            raise ValueError("images must be a list of strings")
        return cls(images=list(images))

    def decode_images(self) -> List[bytes]:
        """Decode every image, skipping and logging those that are not valid base64."""
        decoded = []
        for image in self.images:
            try:
                decoded.append(base64.b64decode(image, validate=True))
            except (binascii.Error, ValueError) as exc:
                logger.error("decode stable diffusion image failed: %s", exc)
        return decoded


def _is_loopback(url: str) -> bool:
    host = urllib.parse.urlsplit(url).hostname or ""
    if host == "localhost":
        return True
    try:
        return ipaddress.ip_address(host).is_loopback
    except ValueError:
        return False


def _opener(url: str) -> urllib.request.OpenerDirector:
    if _is_loopback(url):
        return urllib.request.build_opener(urllib.request.ProxyHandler({}))
    return urllib.request.build_opener()


def request_stable_diffusion(
    addr: str,
    request: StableDiffusionRequest,
    timeout: float = DEFAULT_TIMEOUT,
) -> StableDiffusionResponse:
    """POST ``request`` to the server at ``addr`` and return its response.

    Raises ServerNotConfiguredError without an address, ServerNotAvailableError
    when the server cannot be reached, RequestNotOKError on a status other
    than 200, and ValueError when the body is not a valid response.
    """
    if not addr:
        raise ServerNotConfiguredError()

    url = addr + TXT2IMG_PATH
    http_request = urllib.request.Request(
        url,
        data=request.to_json().encode("utf-8"),
        headers={"Content-Type": "application/json"},
        method="POST",
    )
    try:
        with _opener(url).open(http_request, timeout=timeout) as response:
            status = response.status
            body = response.read()
    except urllib.error.HTTPError as exc:
        status = exc.code
        body = exc.read()
    except (urllib.error.URLError, OSError) as exc:
        logger.error("request stable diffusion failed: %s", exc)
        raise ServerNotAvailableError("request stable diffusion failed") from exc

    text = body.decode("utf-8", errors="replace")
    if status != 200:
        logger.error("stable diffusion response status %d: %s", status, text)
        raise RequestNotOKError(status, text)
    return StableDiffusionResponse.from_json(text)


def join_api(base_url: str, path: str) -> str:
    """Append ``path`` to ``base_url`` without doubling the slash; empty stays empty."""
    if not base_url:
        return ""
    return base_url.removesuffix("/") + path


def build_prompt(config: StableDiffusionConfig, prompt: str) -> StableDiffusionRequest:
    """A request from ``config`` with the user's ``prompt`` appended.

    Full-width commas in the prompt become plain commas.
    """
    request = config.to_request()
    request.prompt += ", " + prompt.replace("，", ",")
    return request