import pytest

from contentid import Base, InvalidBase, MalformedCid
from contentid.multibase import decode, encode, resolve_base


def test_base32_lower_unpadded():
    assert encode(b"f", "base32") == "bmy"
    assert encode(b"fo", Base.BASE32) == "bmzxq"
    assert "=" not in encode(b"foobar!", "base32")


def test_base58_preserves_leading_zeros():
    assert encode(b"\x00\x00\x01", "base58") == "z112"
    assert decode("z112") == (Base.BASE58, b"\x00\x00\x01")


def test_prefix_follows_base():
    for b in Base:
        assert encode(b"abc", b)[0] == b.prefix
    assert Base.BASE32.prefix == "b" and Base.BASE58.prefix == "z"


def test_decode_unpadded_base32():
    assert decode("bmzxq") == (Base.BASE32, b"fo")


@pytest.mark.parametrize("value", ["base64", "wrong_base", "", 32, object()])
def test_unknown_base(value):
    with pytest.raises(InvalidBase):
        resolve_base(value)
    with pytest.raises(InvalidBase):
        encode(b"x", value)


def test_decode_errors():
    with pytest.raises(InvalidBase):
        decode("mAAAA")
    with pytest.raises(MalformedCid):
        decode("z0OIl")
    with pytest.raises(MalformedCid):
        decode("")
