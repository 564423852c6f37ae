"""Per-user image generation settings and the request built from them."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple, Union

from gotkit.strconv import IntKind, a2i


class StableDiffusionError(Exception):
    """Base class of the errors raised while configuring or calling a server."""

    message = "stable diffusion error"

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(f"{self.message}: {detail}" if detail else self.message)


class ServerNotConfiguredError(StableDiffusionError):
    """No server address is known."""

    message = "server not configured"


class ServerNotAvailableError(StableDiffusionError):
    """The server could not be reached."""

    message = "server not available"


class ConfigKeyNotSupportedError(StableDiffusionError):
    """A configuration key is not supported."""

    message = "config key not support"


class ConfigInvalidError(StableDiffusionError, ValueError):
    """A configuration key or value was rejected."""

    message = "config is invalid"


class RequestNotOKError(StableDiffusionError):
    """The server answered with a status other than 200."""

    message = "request not ok"

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"request stable diffusion failed, status code: {status_code}, "
            f"response: {body}"
        )


KEY_NOT_EXISTS = "key not exists"
HIDDEN_SERVER = "🤫"

DEFAULTS: Mapping[str, Any] = MappingProxyType(
    {
        "prompt": "masterpiece, best quality",
        "negative_prompt": (
            "nsfw, lowres, bad anatomy, bad hands, (((deformed))), [blurry], "
            "(poorly drawn hands), (poorly drawn feet), "
            "text, error, missing fingers, extra digit, "
            "fewer digits, cropped, worst quality, low quality, normal quality, "
            "jpeg artifacts, signature, watermark, username, blurry"
        ),
        "steps": 28,
        "scale": 7,
        "width": 512,
        "height": 512,
        "number": 1,
        "sampler": "Euler a",
        "hr": "off",
        "denoising_strength": 0.6,
        "hr_scale": 2.0,
        "hr_upscaler": "Latent",
        "hr_second_pass_steps": 20,
    }
)
"""Values reported for settings the user has left unset."""

HELP_INFO = (
    "sdcfg set \\<key\\> \\<value\\>\n"
    "sdcfg get \\<key\\>\n"
    "available keys: \n"
    "`server`: your own stable diffusion server address\\(write only\\)\\.\n"
    "`prompt`: your default prompt, will add to your every command call\\.\n"
    "`negative_prompt`: your default negative prompt, will add to your every command call\\.\n"
    "`steps`: steps for stable diffusion\\.\n"
    "`scale`: scale for stable diffusion\\.\n"
    "`res`: resolution __width__x__height__\\.\n"
    "`number`: number of images for once command call\\.\n"
    "`sampler`: sampler for stable diffusion, default is `Euler a`\\.\n"
    "`hr`: high resolution fix `on`/`off`, will force `number` to 1\\.\n"
    "`denoising_strength`: denoising strength for high resolution\\.\n"
    "`hr_scale`: high resolution scale\\.\n"
    "`hr_upscaler`: high resolution upscaler, default is `Latent`\\.\n"
    "`hr_second_pass_steps`: high resolution fix steps\\."
)
"""Usage text for the configuration command, in MarkdownV2."""

_INT_LIMITS: Dict[str, Tuple[int, int]] = {
    "steps": (1, 50),
    "scale": (1, 20),
    "number": (1, 4),
    "hr_second_pass_steps": (0, 50),
}
_FLOAT_LIMITS: Dict[str, Tuple[float, float]] = {
    "denoising_strength": (0.0, 1.0),
    "hr_scale": (1.0, 4.0),
}
_MAX_SIDE = 1024


def _parse_int(key: str, value: str) -> int:
    try:
        return a2i(value, 10, IntKind.INT)
    except ValueError:
        raise ConfigInvalidError(f"{key} must be a integer") from None


def _parse_float(key: str, value: str) -> float:
    if value != value.strip() or "_" in value:
        raise ConfigInvalidError(f"{key} must be a float")
    try:
        return float(value)
    except ValueError:
        raise ConfigInvalidError(f"{key} must be a float") from None


def _round_to_64(n: int) -> int:
    return n // 64 * 64 if n >= 0 else -((-n) // 64 * 64)


@dataclass
class StableDiffusionRequest:
    """Body of a text-to-image request; field names are the wire names."""

    prompt: str = ""
    negative_prompt: str = ""
    steps: int = 0
    cfg_scale: int = 0
    width: int = 0
    height: int = 0
    batch_size: int = 0
    sampler_index: str = ""
    enable_hr: bool = False
    denoising_strength: float = 0.0
    hr_scale: float = 0.0
    hr_upscaler: str = ""
    hr_second_pass_steps: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """The request as a JSON-ready mapping."""
        return asdict(self)

    def to_json(self) -> str:
        """The request as a JSON document."""
        return json.dumps(self.to_dict(), ensure_ascii=False)


@dataclass
class StableDiffusionConfig:
    """A user's generation settings; empty or zero fields mean the default."""

    server: str = ""
    prompt: str = ""
    negative_prompt: str = ""
    steps: int = 0
    scale: int = 0
    width: int = 0
    height: int = 0
    number: int = 0
    sampler: str = ""
    hr: str = ""
    denoising_strength: float = 0.0
    hr_scale: float = 0.0
    hr_upscaler: str = ""
    hr_second_pass_steps: int = 0

    def get_value(self, key: str) -> Union[str, int, float]:
        """The effective value of ``key``.

        The server address is never shown; an unknown key yields the text
        ``"key not exists"``.
        """
        if key == "server":
            return HIDDEN_SERVER
        if key == "res":
            return f"{self.get_value('width')}x{self.get_value('height')}"
        if key not in DEFAULTS:
            return KEY_NOT_EXISTS
        current = getattr(self, key)
        return current if current else DEFAULTS[key]

    def set_value(self, key: str, value: str) -> None:
        """Set ``key`` from the text ``value``; raise ConfigInvalidError if rejected."""
        if key == "server":
            self.server = "" if value == "*" else value.removesuffix("/")
        elif key in ("prompt", "negative_prompt"):
            setattr(self, key, value)
        elif key in _INT_LIMITS:
            number = _parse_int(key, value)
            low, high = _INT_LIMITS[key]
            if not low <= number <= high:
                raise ConfigInvalidError(f"{key} too small or too large")
            setattr(self, key, number)
        elif key in ("width", "height"):
            side = _round_to_64(_parse_int(key, value))
            if not 1 <= side <= _MAX_SIDE:
                raise ConfigInvalidError(f"{key} too small or too large")
            setattr(self, key, side)
        elif key == "res":
            parts = value.split("x")
            if len(parts) != 2:
                raise ConfigInvalidError("invalid resolution")
            self.set_value("width", parts[0])
            self.set_value("height", parts[1])
        elif key == "sampler":
            self.sampler = DEFAULTS["sampler"] if value == "*" else value
        elif key == "hr":
            self.hr = "on" if value == "on" else "off"
        elif key in _FLOAT_LIMITS:
            number = _parse_float(key, value)
            low, high = _FLOAT_LIMITS[key]
            if number < low or number > high:
                raise ConfigInvalidError(f"{key} must be between {low:g} and {high:g}")
            setattr(self, key, number)
        elif key == "hr_upscaler":
            self.hr_upscaler = DEFAULTS["hr_upscaler"] if value == "*" else value
        else:
            raise ConfigInvalidError(f"invalid key: {key}")

    def get_server(self, default_server: str = "") -> str:
        """The user's server, or ``default_server``, without a trailing slash."""
        server = self.server or default_server
        return server.removesuffix("/")

    def to_request(self) -> StableDiffusionRequest:
        """Build a request from the effective settings.

        With high resolution fix on, only one image is requested.
        """
        request = StableDiffusionRequest(
            prompt=self.get_value("prompt"),
            negative_prompt=self.get_value("negative_prompt"),
            steps=self.get_value("steps"),
            cfg_scale=self.get_value("scale"),
            width=self.get_value("width"),
            height=self.get_value("height"),
            batch_size=self.get_value("number"),
            sampler_index=self.get_value("sampler"),
        )
        if self.get_value("hr") == "on":
            request.enable_hr = True
            request.denoising_strength = float(self.get_value("denoising_strength"))
            request.hr_scale = float(self.get_value("hr_scale"))
            request.hr_upscaler = self.get_value("hr_upscaler")
            request.hr_second_pass_steps = self.get_value("hr_second_pass_steps")
            request.batch_size = 1
        return request

    def to_json(self) -> str:
        """The stored settings as a JSON document."""
        return json.dumps(asdict(self), ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> "StableDiffusionConfig":
        """Load settings from JSON; unknown keys are ignored, keys match case-insensitively.

        Raises ValueError on malformed JSON or a value of the wrong type.
        """
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("config must be a JSON object")
        types = {f.name: f.type for f in fields(cls)}
        by_lower = {name.lower(): name for name in types}
        config = cls()
        for raw_key, raw_value in data.items():
            name = raw_key if raw_key in types else by_lower.get(raw_key.lower())
            if name is None or raw_value is None:
                continue
            setattr(config, name, _coerce(name, types[name], raw_value))
        return config


def _coerce(name: str, kind: Any, value: Any) -> Any:
    kind_name = kind if isinstance(kind, str) else kind.__name__
    if kind_name == "str" and isinstance(value, str):
        return value
    if kind_name == "int" and isinstance(value, int) and not isinstance(value, bool):
        return value
    if (
        kind_name == "float"
        and isinstance(value, (int, float))
        and not isinstance(value, bool)
    ):
        return float(value)
    raise ValueError(f"cannot load {value!r} into {name} of type {kind_name}")