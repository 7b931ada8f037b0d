import pytest

from linkshortener.utils.runtime import running_locally


@pytest.mark.parametrize(
    'app_env, expected',
    [
        ('local', True),
        ('LOCAL', True),
        ('dev', False),
        ('prod', False),
    ],
)
def test_running_locally(monkeypatch, app_env, expected):
    monkeypatch.setenv('APP_ENV', app_env)
    assert running_locally() is expected


def test_running_locally_defaults_to_local(monkeypatch):
    monkeypatch.delenv('APP_ENV', raising=False)
    assert running_locally() is True
