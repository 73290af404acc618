HASH_MULTIPLIER = 31
INT32_MASK = 0xFFFFFFFF
INT32_SIGN_BIT = 0x80000000
INT32_MIN = -0x80000000


def _code_units(key: str):
    # UTF-16 code units, so characters outside the BMP count as surrogate pairs
    data = key.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def hash_code(key: str) -> int:
    """
    Polynomial rolling hash: h = h * 31 + unit over the key's code units,
    wrapped to a signed 32-bit integer after every step.
    """
    if not isinstance(key, str):
        raise TypeError(f"keys must be str, got {type(key).__name__}")

    h = 0
    for unit in _code_units(key):
        h = (HASH_MULTIPLIER * h + unit) & INT32_MASK

    if h & INT32_SIGN_BIT:
        h -= 1 << 32
    return h


def bucket_index(code: int, capacity: int) -> int:
    if code == INT32_MIN:
        # Fixed-width abs() would overflow here; use the magnitude directly
        magnitude = -INT32_MIN
    else:
        magnitude = abs(code)
    return magnitude % capacity
