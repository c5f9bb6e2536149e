# SPDX-License-Identifier: MIT

"""Per-invocation rendering switches set by the root command callback."""

from contextvars import ContextVar

_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)


def set_show_header(value: bool) -> None:
    _show_header_var.set(value)


def get_show_header() -> bool:
    """Whether views print the daybook banner above their output."""
    return _show_header_var.get()
