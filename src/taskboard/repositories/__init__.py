"""Repository layer for data access."""

from .items import ItemRepository
from .memory import InMemoryRepository
from .protocol import BoardRepositoryProtocol
from .yaml_file import YamlBoardRepository

__all__ = [
    "BoardRepositoryProtocol",
    "InMemoryRepository",
    "ItemRepository",
    "YamlBoardRepository",
]
