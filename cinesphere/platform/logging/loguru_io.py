from collections.abc import Generator
from functools import wraps
from inspect import isgeneratorfunction
from typing import TYPE_CHECKING, Any, Callable, Optional, ParamSpec, TypeVar, cast, overload


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from cinesphere.platform.config.core_setting import settings
from cinesphere.platform.exception.exceptions import CustomBaseError
from cinesphere.platform.logging.generator_wrapper import GeneratorWrapper
from cinesphere.platform.logging.loguru_io_config import ExtraField, custom_logger
from cinesphere.platform.logging.loguru_io_utils import (
    describe_call_target,
    enter_call,
    indent,
    leave_call,
    truncate_content,
)


_F = TypeVar('_F', bound=Callable[..., Any])
_P = ParamSpec('_P')
_T = TypeVar('_T')


class LoguruIO:
    """
    Decorator logging a callable's inputs and outputs.

    - args / return (or each yield) at DEBUG, only when settings.DEBUG is on
    - CustomBaseError at ERROR without traceback, anything else with traceback
    - an exception is logged once, by the innermost decorated frame it crosses
    """

    def __init__(
        self, base_logger: 'LoguruLogger', *, reraise: bool = True, truncate_content: bool = True
    ) -> None:
        self._base_logger = base_logger
        self.reraise = reraise
        self.truncate_content = truncate_content
        self.call_target = '-'

    def _bound(self, depth: int = 0) -> 'LoguruLogger':
        return self._base_logger.bind(
            **{ExtraField.CALL_TARGET: self.call_target, ExtraField.CALL_DEPTH: depth}
        ).opt(depth=2)

    def render(self, data: Any) -> Any:
        return truncate_content(data) if self.truncate_content else data

    def log_message(self, depth: int, message: str) -> None:
        if settings.DEBUG:
            self._bound(depth).debug(f'{indent(depth)}{message}')

    def log_exception(self, e: Exception) -> None:
        if getattr(e, '_has_logged', False):
            return
        e._has_logged = True  # type: ignore[attr-defined]
        message = f'{type(e).__name__}: {e}'
        if isinstance(e, CustomBaseError):
            self._bound().error(message)
        else:
            self._bound().exception(message)

    def _wrap_generator(self, func: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(func)
        def generator_wrapper(*args: Any, **kwargs: Any) -> Optional[GeneratorWrapper]:
            depth = enter_call()
            try:
                self.log_message(
                    depth, f'args: {self.render(args)}, kwargs: {self.render(kwargs)}'
                )
                gen_obj = cast(Generator[Any, Any, Any], func(*args, **kwargs))
                return GeneratorWrapper(gen_obj, self)
            except Exception as e:
                self.log_exception(e)
                if self.reraise:
                    raise
                return None
            finally:
                leave_call()

        return generator_wrapper

    def _wrap_call(self, func: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            depth = enter_call()
            try:
                self.log_message(
                    depth, f'args: {self.render(args)}, kwargs: {self.render(kwargs)}'
                )
                return_value = func(*args, **kwargs)
                self.log_message(depth, f'return: {self.render(return_value)}')
                return return_value
            except Exception as e:
                self.log_exception(e)
                if self.reraise:
                    raise
                return None
            finally:
                leave_call()

        return sync_wrapper

    def __call__(self, func: _F) -> _F:
        self.call_target = describe_call_target(func)
        if isgeneratorfunction(func):
            return cast(_F, self._wrap_generator(func))
        return cast(_F, self._wrap_call(func))


class Logger:
    base = custom_logger

    @overload
    @staticmethod
    def io(func: Callable[_P, _T]) -> Callable[_P, _T]: ...

    @overload
    @staticmethod
    def io(func: None = ..., *, reraise: bool = ..., truncate_content: bool = ...) -> LoguruIO: ...

    @staticmethod
    def io(
        func: Callable[_P, _T] | None = None, *, reraise: bool = True, truncate_content: bool = True
    ) -> Callable[_P, _T] | LoguruIO:
        decorator = LoguruIO(custom_logger, reraise=reraise, truncate_content=truncate_content)
        if func:
            return decorator(func)
        return decorator
