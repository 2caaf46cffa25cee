"""
Composable text pipelines.

A `Pipeline` is an immutable, named sequence of transforms applied strictly in
declared order, each stage consuming the previous stage's output.

Usage:
    from recordlens.functional.pipeline import Pipeline, trim, upper

    shout = Pipeline("shout").then(trim).then(upper)
    shout("  hi ")  # "HI"
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Dict, Tuple

from recordlens.functional.abstract import Transform

MASK_CHAR = "*"
UNKNOWN_MODE = "Unknown mode"

# Every character except the line terminators \n \r U+0085 U+2028 U+2029,
# which masking leaves in place.
_MASKABLE = re.compile("[^\n\r\u0085\u2028\u2029]")

# Control characters and the ASCII space, U+0000 through U+0020.
_TRIMMABLE = "".join(chr(code) for code in range(0x21))


def trim(text: str) -> str:
    """Strip leading and trailing characters up to U+0020; NBSP and other
    Unicode spaces are kept."""
    return text.strip(_TRIMMABLE)


def upper(text: str) -> str:
    return text.upper()


def mask(text: str) -> str:
    """Replace every non-line-terminator character with `MASK_CHAR`; length is preserved."""
    return _MASKABLE.sub(MASK_CHAR, text)


def reverse(text: str) -> str:
    return text[::-1]


@dataclass(frozen=True)
class Pipeline:
    """
    Left-to-right composition of text transforms.

    Pipelines are values: `then` returns a new pipeline and leaves the
    receiver untouched. An empty pipeline returns its input unchanged.
    """

    name: str
    stages: Tuple[Transform, ...] = field(default=())

    def then(self, transform: Transform) -> "Pipeline":
        return Pipeline(self.name, self.stages + (transform,))

    def __call__(self, text: str) -> str:
        for stage in self.stages:
            text = stage(text)
        return text

    def __len__(self) -> int:
        return len(self.stages)


MASKING_PIPELINE = Pipeline("trim-upper-mask", (trim, upper, mask))

_NAMED_TRANSFORMS: Dict[str, Callable[[str], str]] = {
    "reverse": reverse,
    "upper": upper,
}


def text_pipeline(text: str) -> str:
    """Trim, uppercase, then mask `text`."""
    return MASKING_PIPELINE(text)


def apply_function(text: str, transform: Transform) -> str:
    return transform(text)


def apply_named_function(text: str, mode: str) -> str:
    """
    Apply one of the named transforms ("reverse", "upper"; case-insensitive).

    Unrecognized modes produce the string "Unknown mode" rather than an error.
    """
    transform = _NAMED_TRANSFORMS.get(mode.lower())
    if transform is None:
        return UNKNOWN_MODE
    return apply_function(text, transform)


def available_modes() -> list[str]:
    return sorted(_NAMED_TRANSFORMS)


__all__ = [
    "MASK_CHAR",
    "MASKING_PIPELINE",
    "UNKNOWN_MODE",
    "Pipeline",
    "apply_function",
    "apply_named_function",
    "available_modes",
    "mask",
    "reverse",
    "text_pipeline",
    "trim",
    "upper",
]
