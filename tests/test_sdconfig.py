import json

import pytest

from gotkit.sdconfig import (
    DEFAULTS,
    HIDDEN_SERVER,
    KEY_NOT_EXISTS,
    ConfigInvalidError,
    RequestNotOKError,
    StableDiffusionConfig,
    StableDiffusionError,
    StableDiffusionRequest,
)


def test_defaults_are_reported_for_unset_fields():
    cfg = StableDiffusionConfig()
    assert cfg.get_value("steps") == 28
    assert cfg.get_value("width") == 512
    assert cfg.get_value("sampler") == "Euler a"
    assert cfg.get_value("hr_upscaler") == "Latent"
    assert cfg.get_value("hr") == "off"
    for key, default in DEFAULTS.items():
        assert cfg.get_value(key) == default


def test_server_is_hidden_and_unknown_key_reported():
    cfg = StableDiffusionConfig(server="http://gpu.example.com")
    assert cfg.get_value("server") == HIDDEN_SERVER
    assert cfg.get_value("nope") == KEY_NOT_EXISTS


def test_set_integer_within_limits():
    cfg = StableDiffusionConfig()
    cfg.set_value("steps", "50")
    cfg.set_value("scale", "1")
    cfg.set_value("number", "4")
    assert cfg.get_value("steps") == 50
    assert cfg.get_value("scale") == 1
    assert cfg.get_value("number") == 4


@pytest.mark.parametrize(
    "key,value",
    [
        ("steps", "0"),
        ("steps", "51"),
        ("steps", "abc"),
        ("scale", "21"),
        ("number", "5"),
        ("width", "2000"),
        ("height", "10"),
        ("res", "640"),
        ("res", "64x64x64"),
        ("denoising_strength", "1.5"),
        ("denoising_strength", "x"),
        ("hr_scale", "0.5"),
        ("hr_second_pass_steps", "-1"),
        ("bogus", "1"),
    ],
)
def test_invalid_values_raise(key, value):
    cfg = StableDiffusionConfig()
    with pytest.raises(ConfigInvalidError):
        cfg.set_value(key, value)


def test_error_message_carries_category():
    cfg = StableDiffusionConfig()
    with pytest.raises(ConfigInvalidError) as info:
        cfg.set_value("steps", "abc")
    assert str(info.value).startswith("config is invalid")
    assert isinstance(info.value, StableDiffusionError)


def test_width_is_rounded_to_multiple_of_64():
    cfg = StableDiffusionConfig()
    cfg.set_value("width", "700")
    width = cfg.get_value("width")
    assert width % 64 == 0
    assert 700 - 64 < width <= 700


def test_resolution_sets_both_sides():
    cfg = StableDiffusionConfig()
    cfg.set_value("res", "640x320")
    assert cfg.width == 640
    assert cfg.height == 320
    assert cfg.get_value("res") == "640x320"


def test_server_trailing_slash_and_reset():
    base = "http://gpu.example.com"
    cfg = StableDiffusionConfig()
    cfg.set_value("server", base + "/")
    assert cfg.get_server() == base
    cfg.set_value("server", "*")
    assert cfg.server == ""
    assert cfg.get_server(base + "/") == base


def test_star_restores_sampler_and_upscaler_defaults():
    cfg = StableDiffusionConfig(sampler="DDIM", hr_upscaler="ESRGAN")
    cfg.set_value("sampler", "*")
    cfg.set_value("hr_upscaler", "*")
    assert cfg.sampler == "Euler a"
    assert cfg.hr_upscaler == "Latent"


def test_hr_switch_only_accepts_on():
    cfg = StableDiffusionConfig()
    cfg.set_value("hr", "on")
    assert cfg.hr == "on"
    cfg.set_value("hr", "yes")
    assert cfg.hr == "off"


def test_request_without_hires():
    cfg = StableDiffusionConfig(number=3, scale=9)
    req = cfg.to_request()
    assert req.batch_size == 3
    assert req.cfg_scale == 9
    assert req.enable_hr is False
    assert req.sampler_index == DEFAULTS["sampler"]


def test_request_with_hires_forces_single_image():
    cfg = StableDiffusionConfig(number=4, hr="on")
    req = cfg.to_request()
    assert req.enable_hr is True
    assert req.batch_size == 1
    assert req.hr_upscaler == "Latent"
    assert req.denoising_strength == DEFAULTS["denoising_strength"]
    assert req.hr_second_pass_steps == DEFAULTS["hr_second_pass_steps"]


def test_request_wire_names():
    data = json.loads(StableDiffusionRequest().to_json())
    assert {"cfg_scale", "sampler_index", "enable_hr", "batch_size"} <= set(data)


def test_config_json_round_trip():
    cfg = StableDiffusionConfig(server="http://a.example.com", steps=12, hr="on", hr_scale=1.5)
    assert StableDiffusionConfig.from_json(cfg.to_json()) == cfg


def test_from_json_ignores_unknown_and_null():
    cfg = StableDiffusionConfig.from_json('{"Steps": 9, "extra": 1, "prompt": null}')
    assert cfg.steps == 9
    assert cfg.prompt == ""


@pytest.mark.parametrize("text", ["[]", '{"steps": "x"}', '{"steps": 1.5}', "{"])
def test_from_json_rejects_bad_input(text):
    with pytest.raises(ValueError):
        StableDiffusionConfig.from_json(text)


def test_request_not_ok_keeps_status():
    err = RequestNotOKError(502, "bad gateway")
    assert err.status_code == 502
    assert "bad gateway" in str(err)