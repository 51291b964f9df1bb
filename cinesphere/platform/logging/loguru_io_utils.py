from inspect import getsourcelines
from os.path import basename
from typing import Any, Callable

from cinesphere.platform.logging.loguru_io_config import MAX_CONTENT_LENGTH, call_depth_var


def describe_call_target(func: Callable[..., Any]) -> str:
    """`file.py::Class.method:lineno` for the decorated callable."""
    target = getattr(func, '__func__', func)
    try:
        lineno = getsourcelines(target)[1]
    except (OSError, TypeError):
        lineno = 0
    return f'{basename(target.__code__.co_filename)}::{func.__qualname__}:{lineno}'


def enter_call() -> int:
    depth = call_depth_var.get() + 1
    call_depth_var.set(depth)
    return depth


def leave_call() -> None:
    call_depth_var.set(max(call_depth_var.get() - 1, 0))


def indent(depth: int) -> str:
    return '  ' * max(depth - 1, 0)


def truncate_content(content: Any, max_length: int = MAX_CONTENT_LENGTH) -> Any:
    rendered = str(content)
    if len(rendered) <= max_length:
        return content
    return f'{rendered[:max_length]}...(+{len(rendered) - max_length} chars)'
