import pytest

from hashtables.hashing import INT32_MIN, bucket_index, hash_code


def test_hash_code_empty_key():
    assert hash_code("") == 0


def test_hash_code_polynomial():
    assert hash_code("a") == 97
    assert hash_code("ab") == 97 * 31 + 98
    assert hash_code("hello") == 99162322


def test_hash_code_order_sensitive():
    assert hash_code("ab") != hash_code("ba")


def test_hash_code_case_sensitive():
    assert hash_code("Lion") != hash_code("lion")


def test_hash_code_wraps_to_signed_32_bit():
    code = hash_code("a much longer key that overflows thirty two bits many times over")
    assert -2 ** 31 <= code < 2 ** 31


def test_hash_code_can_hit_int32_min():
    assert hash_code("polygenelubricants") == INT32_MIN


def test_hash_code_uses_utf16_code_units():
    # U+1F600 is the surrogate pair D83D DE00
    assert hash_code("\U0001F600") == 0xD83D * 31 + 0xDE00


@pytest.mark.parametrize("key", [None, 42, b"bytes", ("a",)])
def test_hash_code_rejects_non_str(key):
    with pytest.raises(TypeError):
        hash_code(key)


def test_bucket_index_negative_code():
    assert bucket_index(-17, 16) == 1


def test_bucket_index_int32_min():
    assert bucket_index(INT32_MIN, 16) == 0
    assert 0 <= bucket_index(INT32_MIN, 7) < 7


@pytest.mark.parametrize("key", ["", "a", "lion", "polygenelubricants", "ice cream"])
@pytest.mark.parametrize("capacity", [1, 3, 16, 1024])
def test_bucket_index_in_range(key, capacity):
    assert 0 <= bucket_index(hash_code(key), capacity) < capacity
