"""Cleanup of raw model output before JSON decoding.

Each transform is a pure `str -> str` function that returns its input
unchanged when its pattern is absent. `normalize()` applies them in
order until the text stops changing, so it is idempotent. Model-specific
quirks are handled by appending a transform to `NORMALIZERS`.
"""

import re
from collections.abc import Callable

_FENCE_OPEN = re.compile(r"```(?:json)?[ \t]*\r?\n", re.IGNORECASE)
_FENCE_CLOSE = "```"
_BOXED_OPEN = re.compile(r"\\boxed\s*\{")


def strip_code_fences(text: str) -> str:
    """Keep only the interior of the first ```json (or bare ```) block.

    An opener with no closing fence keeps everything after the opener.
    """
    opener = _FENCE_OPEN.search(text)
    if opener is None:
        return text

    rest = text[opener.end() :]
    close = rest.find(_FENCE_CLOSE)
    interior = rest if close == -1 else rest[:close]
    return interior.strip()


def strip_boxed_wrapper(text: str) -> str:
    r"""Replace the first `\boxed{...}` with its interior.

    The closing brace is found by counting braces outside of JSON string
    literals, so braces belonging to the payload are kept. When no
    balanced close exists only the opener is removed.
    """
    opener = _BOXED_OPEN.search(text)
    if opener is None:
        return text

    close = _matching_brace(text, opener.end())
    if close == -1:
        return (text[: opener.start()] + text[opener.end() :]).strip()

    interior = text[opener.end() : close].strip()
    return (text[: opener.start()] + interior + text[close + 1 :]).strip()


def _matching_brace(text: str, start: int) -> int:
    """Index of the brace closing the one opened just before `start`, or -1."""
    depth = 1
    in_string = False
    escaped = False

    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue

        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return index

    return -1


NORMALIZERS: tuple[Callable[[str], str], ...] = (
    strip_code_fences,
    strip_boxed_wrapper,
)


def normalize(raw: str) -> str:
    """Strip fences then boxed wrappers, repeating until nothing changes."""
    text = raw
    while True:
        cleaned = text
        for transform in NORMALIZERS:
            cleaned = transform(cleaned)
        if cleaned == text:
            return cleaned
        text = cleaned
