import pytest

from contentid import reset_base
from contentid.constants import ENV_BASE


@pytest.fixture(autouse=True)
def _clean_base(monkeypatch):
    # Each test starts from the default base (no override, no env)
    monkeypatch.delenv(ENV_BASE, raising=False)
    reset_base()
    yield
    reset_base()
