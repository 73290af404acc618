from hashtables.hash_table import HashTable, _KeyNode


class HashSet(HashTable):
    """String set with chained buckets; adding a present key changes nothing."""

    def add(self, key: str) -> None:
        self._put(_KeyNode(key))

    def __repr__(self) -> str:
        return f"HashSet({{{', '.join(repr(key) for key in self.keys())}}})"
