from abc import ABC, abstractmethod


class IConsoleIO(ABC):
    """Line-based terminal collaborator used by the interactive console."""

    @abstractmethod
    def read(self, prompt: str) -> str:
        """
        Raises:
            EOFError: input stream closed
        """
        pass

    @abstractmethod
    def write(self, text: str = '') -> None:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass
