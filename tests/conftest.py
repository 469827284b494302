import pytest

from xkpwgen.config import CONFIG_ENV_VAR


@pytest.fixture(autouse = True)
def no_user_config(monkeypatch, tmp_path):
    """Keeps tests from reading the user's own config file."""
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / 'absent.ini'))
