"""A pool of browser user-agent strings to pick from at random."""

from __future__ import annotations

import random
from typing import Tuple

_CHROME = (
    "Mozilla/5.0 ({platform}) AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/{version} Safari/537.36"
)
_EDGE = _CHROME + " Edge/{edge}"
_FIREFOX = "Mozilla/5.0 ({platform}; rv:{rv}) Gecko/20100101 Firefox/{version}"
_SAFARI = (
    "Mozilla/5.0 ({platform}) AppleWebKit/{webkit} (KHTML, like Gecko) "
    "Version/{version} Safari/{safari}"
)
_ANDROID_CHROME = (
    "Mozilla/5.0 (Linux; Android {android}; {device}) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/{version} Mobile Safari/537.36"
)
_ANDROID_WEBVIEW = (
    "Mozilla/5.0 (Linux; Android {android}; {device}; wv) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Version/4.0 Chrome/{version} Mobile Safari/537.36"
)

_CHROME_DESKTOP = (
    ("Macintosh; Intel Mac OS X 10_15_7", "94.0.4606.71"),
    ("Windows NT 10.0; Win64; x64", "70.0.3538.77"),
    ("X11; Ubuntu; Linux x86_64", "55.0.2919.83"),
    ("Macintosh; Intel Mac OS X 10_8_3", "54.0.2866.71"),
    ("Macintosh; Intel Mac OS X 10_9_2", "52.0.2762.73"),
    ("Windows NT 6.1", "41.0.2228.0"),
    ("X11; Linux x86_64", "13.0.782.220"),
    ("Windows NT 6.1; WOW64", "13.0.782.24"),
)

_EDGE_DESKTOP = (
    ("Windows NT 10.0; Win64; x64", "70.0.3538.102", "18.19582"),
    ("Windows NT 10.0; Win64; x64", "42.0.2311.135", "12.246"),
    ("Windows NT 6.2; WOW64", "46.0.2486.0", "13.9200"),
)

_FIREFOX_DESKTOP = (
    ("Windows NT 10.0; WOW64", "77.0", "77.0"),
    ("X11; Linux ppc64le", "75.0", "75.0"),
    ("X11; Linux", "74.0", "74.0"),
    ("X11; OpenBSD i386", "72.0", "72.0"),
    ("Windows NT 6.3; WOW64", "71.0", "71.0"),
    ("X11; Linux i686", "64.0", "64.0"),
    ("Windows NT 6.2; WOW64", "63.0", "63.0"),
    ("Macintosh; U; Intel Mac OS X 10.10", "62.0", "62.0"),
    ("X11; Ubuntu i686", "52.0", "52.0"),
    ("Windows NT 6.3", "36.0", "36.0"),
    ("Macintosh; Intel Mac OS X 10.6", "25.0", "25.0"),
    ("X11; Ubuntu; Linux x86_64", "24.0", "24.0"),
)

_SAFARI_DESKTOP = (
    ("Macintosh; Intel Mac OS X 10_11_2", "601.3.9", "9.0.2", "601.3.9"),
    ("Macintosh; Intel Mac OS X 10_7_3", "534.55.3", "5.1.3", "534.53.10"),
    ("iPhone; CPU iPhone OS 12_0 like Mac OS X", "605.1.15", "12.0", "604.1"),
    ("Windows; U; Windows NT 5.1; zh-CN", "528.16", "4.0", "528.16"),
)

_ANDROID_PLAIN = (
    ("10", "Android SDK built for x86", "91.0.4472.120"),
    ("6.0.1", "SM-G532G Build/MMB29T", "63.0.3239.83"),
    ("7.0", "SM-G610M Build/NRD90M", "69.0.3497.100"),
    ("6.0", "Nexus 5 Build/MRA58N", "65.0.3325.181"),
    ("11", "SM-A102U", "89.0.4389.72"),
    ("9", "SM-A102U", "74.0.3729.136"),
)

_ANDROID_WV = (
    ("9", "SM-G960F Build/PPR1.180610.011", "74.0.3729.157"),
    ("7.1.2", "AFTMM Build/NS6265", "70.0.3538.110"),
    ("8.0.0", "SM-G930F Build/R16NW", "74.0.3729.157"),
    ("6.0.1", "Redmi 4A Build/MMB29M", "60.0.3112.116"),
)

USER_AGENTS: Tuple[str, ...] = (
    tuple(_CHROME.format(platform=p, version=v) for p, v in _CHROME_DESKTOP)
    + tuple(_EDGE.format(platform=p, version=v, edge=e) for p, v, e in _EDGE_DESKTOP)
    + tuple(_FIREFOX.format(platform=p, rv=rv, version=v) for p, rv, v in _FIREFOX_DESKTOP)
    + tuple(
        _SAFARI.format(platform=p, webkit=w, version=v, safari=s)
        for p, w, v, s in _SAFARI_DESKTOP
    )
    + tuple(
        _ANDROID_CHROME.format(android=a, device=d, version=v) for a, d, v in _ANDROID_PLAIN
    )
    + tuple(
        _ANDROID_WEBVIEW.format(android=a, device=d, version=v) for a, d, v in _ANDROID_WV
    )
)
"""Every user-agent string that :func:`rand_ua` may return."""


def rand_ua() -> str:
    """A user-agent string picked uniformly at random from the pool."""
    return random.choice(USER_AGENTS)