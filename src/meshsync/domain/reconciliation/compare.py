"""Structural comparison of remote route specs.

The control plane drops empty lists from the specs it returns, so a desired
spec with ``()`` where the remote one has ``None`` must not count as a change.
``equate_empty`` makes empty collections equal to absent fields.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

_MISSING = object()


def specs_equal(desired: object, actual: object, *, equate_empty: bool = True) -> bool:
    """Deep equality over dataclasses, mappings and sequences."""

    return next(_differences(desired, actual, path="", equate_empty=equate_empty), None) is None


def spec_diff(desired: object, actual: object, *, equate_empty: bool = True) -> list[str]:
    """Describe each differing leaf as ``path: desired -> actual``."""

    return [
        f"{path or '<root>'}: {_show(left)} -> {_show(right)}"
        for path, left, right in _differences(
            desired, actual, path="", equate_empty=equate_empty
        )
    ]


def _differences(
    left: object,
    right: object,
    *,
    path: str,
    equate_empty: bool,
) -> Iterator[tuple[str, object, object]]:
    if equate_empty:
        left = _collapse_empty(left)
        right = _collapse_empty(right)

    if left is None or right is None:
        if left is not right:
            yield path, left, right
        return

    if dataclasses.is_dataclass(left) and not isinstance(left, type):
        if type(left) is not type(right):
            yield path, left, right
            return
        for spec_field in dataclasses.fields(left):
            yield from _differences(
                getattr(left, spec_field.name),
                getattr(right, spec_field.name),
                path=_join(path, spec_field.name),
                equate_empty=equate_empty,
            )
        return

    if isinstance(left, Mapping) and isinstance(right, Mapping):
        for key in sorted({*left, *right}, key=str):
            yield from _differences(
                left.get(key, _MISSING),
                right.get(key, _MISSING),
                path=_join(path, str(key)),
                equate_empty=equate_empty,
            )
        return

    if isinstance(left, (list, tuple)) and isinstance(right, (list, tuple)):
        if len(left) != len(right):
            yield path, left, right
            return
        for index, (left_item, right_item) in enumerate(zip(left, right, strict=True)):
            yield from _differences(
                left_item,
                right_item,
                path=f"{path}[{index}]",
                equate_empty=equate_empty,
            )
        return

    if left != right:
        yield path, left, right


def _collapse_empty(value: object) -> object:
    if value is _MISSING:
        return None
    if isinstance(value, (list, tuple, Mapping)) and len(value) == 0:
        return None
    return value


def _join(path: str, name: str) -> str:
    return f"{path}.{name}" if path else name


def _show(value: object) -> str:
    if value is None or value is _MISSING:
        return "<absent>"
    return repr(value)
