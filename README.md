# gotkit

A small collection of Python utilities, with no dependencies outside the
standard library.

- `gotkit.ranges`: open, closed and half-open intervals over any ordered
  type. `Range` and `EmptyRange` offer `cover(x)` and `is_empty()`; build
  them with `new_range(low, high, kind)`, `new_closed_range`,
  `new_open_range` and `new_empty_range`. `IntervalType` names the kinds
  (`OPEN`, `CLOSED`, `LCLOSED_ROPEN`, `LOPEN_RCLOSED`).
- `gotkit.strconv`: integer formatting in any base from 2 to 36 (`i2a`,
  `i2dec`, `i2hex`, `i2bin`) and parsing bounded by a fixed-width kind
  (`a2i(text, base, kind)` with `IntKind.INT8` … `IntKind.UINT64`). A base
  of 0 detects `0b`, `0o`, `0x` and `0` prefixes. Bad syntax, a bad base or
  a value out of range raises `ValueError`.
- `gotkit.guarded`: a value behind a mutex (`Guarded`, with `load`, `store`
  and the `locked()` context manager) or behind a reader-writer lock
  (`RWGuarded`, with `read_locked()` and `write_locked()`).
- `gotkit.result`: `Result`, a value-or-error container with `ok`,
  `failure`, `wrap`, `unwrap`, `expect`, `unwrap_or`, `then`, `else_`,
  `map_or_else` and more; `unwrap` and `expect` raise `UnwrapError` on an
  error result. `in_result(result, value)` tests an ok result's value.
- `gotkit.randstr`: random alphanumeric strings. `RandStr(seed, length, rng)`
  and the module-level `rand_str`, `rand_str_len`, `rand_bytes`,
  `rand_bytes_len`. A length of 0 gives an empty result, a negative length
  the default of 8.
- `gotkit.text`: `replace_space` (escapes `\n` and `\t`), `get_name`,
  `get_user_name_from_string` (`"@name"` → `"name"`, otherwise `None`),
  `strings_to_ints` (skips what does not parse), `random_choice`,
  `is_number`, `is_upper`, `is_lower`, and `parse_number(text, rng)`, which
  raises `ValueError` with a user-facing message.
- `gotkit.heap`: `Heap`, a binary heap ordered by `less` and `equal`
  functions, with `push`, `pop`, `top`, `replace` and `is_heap`; built by
  `new_heap`, `new_heap_init` or `take_as_heap` (works on the list in
  place). `sort_top_n` moves the `n` least items to the front of a list.
- `gotkit.ordered_heap`: min-heap routines over plain lists
  (`init_minheap`, `push_minheap`, `pop_minheap`, `top_heap`,
  `slice_is_minheap`) and `OrderedHeap(items, max_heap)`.
- `gotkit.timer`: `Timer` keeps `Task`s sorted by `run_at`; `add_task`
  inserts after tasks with the same time. It stores tasks only and does not
  run them.
- `gotkit.useragents`: `rand_ua()` picks from `USER_AGENTS`.
- `gotkit.sdconfig`: `StableDiffusionConfig`, a user's image generation
  settings with `get_value`, `set_value`, `get_server`, `to_request`,
  `to_json` and `from_json`; `StableDiffusionRequest` is the request body.
  Rejected keys or values raise `ConfigInvalidError`. `HELP_INFO` holds the
  usage text for the settings command.
- `gotkit.sdclient`: `request_stable_diffusion(addr, request, timeout)` POSTs
  to `/sdapi/v1/txt2img` and returns a `StableDiffusionResponse`, whose
  `decode_images()` yields the image bytes. `build_prompt(config, prompt)`
  builds a request with the user's prompt appended, and `join_api` joins a
  base URL and a path.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Examples

    from gotkit.ranges import new_closed_range
    from gotkit.strconv import i2hex, a2i, IntKind
    from gotkit.heap import new_heap_init

    r = new_closed_range(1, 5)
    assert r.cover(5) and not r.cover(6)

    assert i2hex(123) == "7b"
    assert a2i("7fff", 16, IntKind.INT16) == 0x7FFF

    h = new_heap_init([5, 3, 8], lambda a, b: a < b, lambda a, b: a == b)
    assert h.pop() == 3

Stable Diffusion configuration and request:

    from gotkit.sdconfig import StableDiffusionConfig
    from gotkit.sdclient import build_prompt, request_stable_diffusion

    cfg = StableDiffusionConfig()
    cfg.set_value("res", "768x512")
    cfg.set_value("server", "http://localhost:7860/")
    request = build_prompt(cfg, "a cat")
    response = request_stable_diffusion(cfg.get_server(), request)
    images = response.decode_images()

## What it does not do

The package has no chat-bot front end, no command-line program, no storage
for users' settings and no background queue of generation jobs. Settings are
turned to and from JSON with `to_json` and `from_json`; keeping them, and
sending the images anywhere, is left to the caller. `Timer` only keeps tasks
in order and does not schedule or run them.