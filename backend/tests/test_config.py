import pytest

from career_explorer.config import Settings


def test_defaults(monkeypatch):
    for var in ('ENV', 'PORT', 'FRONTEND_URL', 'ALLOW_DEV_CORS', 'LOG_LEVEL', 'SEED_ON_STARTUP'):
        monkeypatch.delenv(var, raising=False)
    s = Settings()
    assert s.ENV == 'dev'
    assert s.PORT == 3000
    assert s.LOG_LEVEL == 'INFO'
    assert s.SEED_ON_STARTUP is False
    assert s.cors_origins() == ['*']


def test_production_uses_frontend_origins(monkeypatch):
    monkeypatch.setenv('ENV', 'production')
    monkeypatch.setenv('FRONTEND_URL', 'https://careers.example.com, http://localhost:5173')
    s = Settings()
    assert s.is_dev is False
    assert s.cors_origins() == ['https://careers.example.com', 'http://localhost:5173']


@pytest.mark.parametrize('port', ['0', '-5', 'abc', '80.5', ''])
def test_invalid_port_rejected(monkeypatch, port):
    monkeypatch.setenv('PORT', port)
    with pytest.raises(RuntimeError, match='PORT must be a positive integer'):
        Settings()
