class _Missing:
    """Marker for a lookup that found nothing; never equal to a stored value."""
    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()
