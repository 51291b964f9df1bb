from typing import TYPE_CHECKING, Any, Generator, Self

from cinesphere.platform.logging.loguru_io_utils import enter_call, leave_call


if TYPE_CHECKING:
    from cinesphere.platform.logging.loguru_io import LoguruIO


class GeneratorWrapper:
    """
    Lazily iterates a decorated generator.

    Each yielded item is logged in DEBUG with its position; an error raised
    mid-iteration goes through the same once-per-exception logging as a call.
    """

    def __init__(self, gen_obj: Generator[Any, Any, Any], io_logger: 'LoguruIO') -> None:
        self._gen_obj = gen_obj
        self._io_logger = io_logger
        self._position = 0

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> Any:
        depth = enter_call()
        try:
            item = next(self._gen_obj)
        except StopIteration:
            self._io_logger.log_message(depth, f'exhausted after {self._position} item(s)')
            raise
        except Exception as e:
            self._io_logger.log_exception(e)
            raise
        finally:
            leave_call()
        self._io_logger.log_message(depth, f'yield #{self._position}: {self._io_logger.render(item)}')
        self._position += 1
        return item

    def close(self) -> None:
        self._gen_obj.close()
