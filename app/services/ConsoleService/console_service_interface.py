from abc import ABC, abstractmethod


class ConsoleServiceInterface(ABC):
    @abstractmethod
    async def start(self) -> None:
        pass
