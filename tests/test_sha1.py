import hashlib

import pytest

from brynetkit.sha1 import SHA1, ReportType


def _short(data: bytes) -> str:
    hasher = SHA1()
    hasher.update(data)
    hasher.final()
    return hasher.report_hash(ReportType.HEX_SHORT)


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"abc", "A9993E364706816ABA3E25717850C26C9CD0D89D"),
        ("abc".encode("utf-16-le"), "9F04F41A848514162050E3D68C1A7ABB441DC2B5"),
        (
            b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
            "84983E441C3BD26EBAAE4AA1F95129E5E54670F1",
        ),
        (
            "abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq".encode("utf-16-le"),
            "51D7D8769AC72C409C5B0E3F69C60ADC9A039014",
        ),
    ],
)
def test_documented_vectors(data, expected):
    assert _short(data) == expected


def test_million_a():
    hasher = SHA1()
    chunk = b"a" * 10000
    for _ in range(100):
        hasher.update(chunk)
    hasher.final()
    assert hasher.report_hash(ReportType.HEX_SHORT) == "34AA973CD4C4DAA4F61EEB2BDBAD27316534016F"


@pytest.mark.parametrize("length", [0, 1, 55, 56, 63, 64, 65, 127, 128, 1000])
def test_matches_reference(length):
    data = bytes(range(256)) * 4
    data = data[:length]
    hasher = SHA1()
    hasher.update(data)
    hasher.final()
    assert hasher.digest() == hashlib.sha1(data).digest()


@pytest.mark.parametrize("step", [1, 3, 17, 63, 64, 100])
def test_chunked_updates_equal_single_update(step):
    data = bytes((i * 7) % 256 for i in range(777))
    hasher = SHA1()
    for start in range(0, len(data), step):
        hasher.update(data[start:start + step])
    hasher.final()
    assert hasher.digest() == hashlib.sha1(data).digest()


def test_report_hex_has_spaces():
    hasher = SHA1()
    hasher.update(b"abc")
    hasher.final()
    assert hasher.report_hash() == "A9 99 3E 36 47 06 81 6A BA 3E 25 71 78 50 C2 6C 9C D0 D8 9D"
    assert hasher.report_hash(ReportType.HEX).replace(" ", "") == hasher.report_hash(
        ReportType.HEX_SHORT
    )


def test_report_digit_lists_bytes():
    hasher = SHA1()
    hasher.update(b"abc")
    hasher.final()
    parts = hasher.report_hash(ReportType.DIGIT).split(" ")
    assert [int(p) for p in parts] == list(hasher.digest())


def test_invalid_report_type():
    hasher = SHA1()
    hasher.final()
    with pytest.raises(ValueError):
        hasher.report_hash(99)


def test_digest_before_final_raises():
    with pytest.raises(RuntimeError):
        SHA1().digest()


def test_reset_starts_over():
    hasher = SHA1()
    hasher.update(b"garbage")
    hasher.reset()
    hasher.update(b"abc")
    hasher.final()
    assert hasher.digest() == hashlib.sha1(b"abc").digest()


def test_reset_after_final_allows_reuse():
    hasher = SHA1()
    hasher.update(b"first")
    hasher.final()
    hasher.reset()
    hasher.update(b"second")
    hasher.final()
    assert hasher.digest() == hashlib.sha1(b"second").digest()


def test_hash_file(tmp_path):
    content = bytes(range(256)) * 300
    path = tmp_path / "data.bin"
    path.write_bytes(content)
    hasher = SHA1()
    hasher.hash_file(path)
    hasher.final()
    assert hasher.digest() == hashlib.sha1(content).digest()


def test_hash_missing_file(tmp_path):
    with pytest.raises(OSError):
        SHA1().hash_file(tmp_path / "missing.bin")


def test_digest_length():
    hasher = SHA1()
    hasher.update(b"x")
    hasher.final()
    assert len(hasher.digest()) == 20