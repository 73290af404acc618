from typing import Iterator, List, Optional

from hashtables.config import DEFAULT_CAPACITY, DEFAULT_LOAD_FACTOR
from hashtables.hashing import bucket_index, hash_code
from hashtables.logger.log_types import LogEvent
from hashtables.logger.logger import log_error_event, log_resize_event, log_table_event


class _KeyNode:
    __slots__ = ("key", "next")

    def __init__(self, key: str):
        self.key = key
        self.next: Optional[_KeyNode] = None


class HashTable:
    """
    Separate-chaining table shared by HashMap and HashSet.

    Owns the bucket array (each slot is None or the head of a singly linked
    chain), the size counter and the grow-on-insert policy. Subclasses decide
    what a node carries and what happens when an inserted key already exists.
    """

    def __init__(self, initial_capacity: int = DEFAULT_CAPACITY, load_factor: float = DEFAULT_LOAD_FACTOR) -> None:
        self._validate(initial_capacity, load_factor)
        self._capacity = initial_capacity
        self._load_factor = float(load_factor)
        self._size = 0
        self._buckets: List[Optional[_KeyNode]] = [None] * self._capacity

        log_table_event(LogEvent.TABLE_CREATED, self._container(), self._capacity, self._load_factor)

    def _container(self) -> str:
        return type(self).__name__

    def _validate(self, initial_capacity, load_factor) -> None:
        error = None
        if isinstance(initial_capacity, bool) or not isinstance(initial_capacity, int):
            error = f"initial_capacity must be an int, got {initial_capacity!r}"
        elif initial_capacity <= 0:
            error = f"initial_capacity must be positive, got {initial_capacity}"
        elif isinstance(load_factor, bool) or not isinstance(load_factor, (int, float)):
            error = f"load_factor must be a number, got {load_factor!r}"
        elif not 0 < load_factor <= 1:
            error = f"load_factor must be in (0, 1], got {load_factor}"

        if error:
            log_error_event(LogEvent.INVALID_CONFIG, self._container(), error)
            raise ValueError(error)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def size(self) -> int:
        return self._size

    @property
    def load_factor(self) -> float:
        return self._load_factor

    def _bucket_index(self, key: str) -> int:
        return bucket_index(hash_code(key), self._capacity)

    def _find(self, key: str) -> Optional[_KeyNode]:
        node = self._buckets[self._bucket_index(key)]
        while node:
            if node.key == key:
                return node
            node = node.next
        return None

    def _merge(self, existing: _KeyNode, incoming: _KeyNode) -> None:
        """Called when an inserted key is already present. Default keeps the existing node."""

    def _put(self, new_node: _KeyNode, grow: bool = True) -> bool:
        idx = self._bucket_index(new_node.key)
        current = self._buckets[idx]

        if current is None:
            self._buckets[idx] = new_node
        else:
            while True:
                if current.key == new_node.key:
                    self._merge(current, new_node)
                    return False
                if current.next is None:
                    break
                current = current.next
            current.next = new_node

        self._size += 1
        if grow and self._should_resize():
            self._resize()
        return True

    def _unlink(self, key: str) -> bool:
        idx = self._bucket_index(key)
        head = self._buckets[idx]
        if head is None:
            return False

        if head.key == key:
            self._buckets[idx] = head.next
            self._size -= 1
            return True

        prev = head
        while prev.next:
            if prev.next.key == key:
                prev.next = prev.next.next
                self._size -= 1
                return True
            prev = prev.next
        return False

    def _nodes(self) -> Iterator[_KeyNode]:
        for head in self._buckets:
            node = head
            while node:
                yield node
                node = node.next

    def _should_resize(self) -> bool:
        return (self._size / self._capacity) > self._load_factor

    def _resize(self) -> None:
        old_nodes = list(self._nodes())
        old_capacity = self._capacity
        count = self._size

        new_capacity = old_capacity * 2
        # Only degenerate settings (tiny capacity with tiny load factor) need more than one doubling
        while count / new_capacity > self._load_factor:
            new_capacity *= 2

        self._capacity = new_capacity
        self._buckets = [None] * new_capacity
        self._size = 0

        for node in old_nodes:
            node.next = None
            self._put(node, grow=False)

        assert self._size == count, "rehash lost entries"
        assert not self._should_resize(), "rehash left table over its load factor"

        log_resize_event(self._container(), old_capacity, new_capacity, count)

    def has(self, key: str) -> bool:
        return self._find(key) is not None

    def remove(self, key: str) -> bool:
        return self._unlink(key)

    def length(self) -> int:
        return self._size

    def clear(self) -> None:
        self._buckets = [None] * self._capacity
        self._size = 0
        log_table_event(LogEvent.TABLE_CLEARED, self._container(), self._capacity, self._load_factor)

    def keys(self) -> List[str]:
        return [node.key for node in self._nodes()]

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key) -> bool:
        return self.has(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())
