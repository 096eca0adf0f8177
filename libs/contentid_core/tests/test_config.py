from contentid import get_base, reset_base, set_base


def test_default_is_base32():
    assert get_base() == "base32"


def test_env_then_override(monkeypatch):
    monkeypatch.setenv("CONTENTID_BASE", "base58")
    assert get_base() == "base58"
    set_base("base32")
    assert get_base() == "base32"
    reset_base()
    assert get_base() == "base58"


def test_any_value_accepted_at_configuration():
    set_base("wrong_base")
    assert get_base() == "wrong_base"
    set_base(None)
    assert get_base() == "base32"
