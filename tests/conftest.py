import os

import pytest

# the cap is read from the environment when strcalc.calculator is first imported
os.environ.pop("STRCALC_MAX_VALUE", None)

from strcalc import StringCalculator  # noqa: E402


@pytest.fixture
def calc():
    return StringCalculator()


@pytest.fixture(autouse=True)
def fresh_default_calculator(monkeypatch):
    # module-level strcalc.add shares one calculator, don't leak counts between tests
    monkeypatch.setattr("strcalc._default", None)
    monkeypatch.delenv("STRCALC_MAX_VALUE", raising=False)
