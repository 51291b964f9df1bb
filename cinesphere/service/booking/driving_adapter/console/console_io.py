from typing import Callable

from cinesphere.service.booking.app.interface.i_console_io import IConsoleIO


_CLEAR_SEQUENCE = '\033[2J\033[H'


class ConsoleIO(IConsoleIO):
    def __init__(
        self,
        *,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
    ) -> None:
        self._input = input_func
        self._output = output_func

    def read(self, prompt: str) -> str:
        return self._input(prompt)

    def write(self, text: str = '') -> None:
        self._output(text)

    def clear(self) -> None:
        self._output(_CLEAR_SEQUENCE)
