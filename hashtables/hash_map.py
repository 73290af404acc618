from typing import Any, List, Tuple

from hashtables.hash_table import HashTable, _KeyNode
from hashtables.missing import MISSING


class _Node(_KeyNode):
    __slots__ = ("value",)

    def __init__(self, key: str, value: Any):
        super().__init__(key)
        self.value = value


class HashMap(HashTable):
    """String-keyed map with chained buckets. Re-setting a key overwrites its value in place."""

    def _merge(self, existing: _Node, incoming: _Node) -> None:
        existing.value = incoming.value

    def set(self, key: str, value: Any) -> None:
        self._put(_Node(key, value))

    def get(self, key: str, default: Any = MISSING) -> Any:
        node = self._find(key)
        if node is None:
            return default
        return node.value

    def values(self) -> List[Any]:
        return [node.value for node in self._nodes()]

    def entries(self) -> List[Tuple[str, Any]]:
        return [(node.key, node.value) for node in self._nodes()]

    def __getitem__(self, key: str) -> Any:
        value = self.get(key)
        if value is MISSING:
            raise KeyError(key)
        return value

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        if not self.remove(key):
            raise KeyError(key)

    def __repr__(self) -> str:
        items = ", ".join(f"{key!r}: {value!r}" for key, value in self.entries())
        return f"HashMap({{{items}}})"
