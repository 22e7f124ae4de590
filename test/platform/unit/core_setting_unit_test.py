import pydantic
import pytest

from src.platform.config.core_setting import Settings


@pytest.mark.unit
class TestSettings:
    def test_reads_required_urls_from_environment(self, monkeypatch):
        monkeypatch.setenv('DATABASE_URL', 'postgresql+asyncpg://hotel:hotel@db:5432/hotel')
        monkeypatch.setenv('ELASTIC_URL', 'http://es:9200')

        settings = Settings(_env_file=None)

        assert settings.DATABASE_URL == 'postgresql+asyncpg://hotel:hotel@db:5432/hotel'
        assert settings.ELASTIC_URL == 'http://es:9200'
        assert settings.ELASTIC_INDEX == 'backend-logs'
        assert settings.REQUIRE_RESERVED_FOR_PAYMENT is False

    @pytest.mark.parametrize('missing', ['DATABASE_URL', 'ELASTIC_URL'])
    def test_missing_required_setting_is_fatal(self, monkeypatch, missing):
        monkeypatch.setenv('DATABASE_URL', 'sqlite+aiosqlite:///hotel.db')
        monkeypatch.setenv('ELASTIC_URL', 'http://es:9200')
        monkeypatch.delenv(missing)

        with pytest.raises(pydantic.ValidationError, match=missing):
            Settings(_env_file=None)

    @pytest.mark.parametrize(
        'raw, expected',
        [
            ('http://a.test, http://b.test', ['http://a.test', 'http://b.test']),
            ('["http://a.test"]', ['http://a.test']),
            ('*', ['*']),
        ],
    )
    def test_cors_origins_accept_comma_list_or_json(self, monkeypatch, raw, expected):
        monkeypatch.setenv('BACKEND_CORS_ORIGINS', raw)

        assert Settings(_env_file=None).BACKEND_CORS_ORIGINS == expected

    def test_elastic_password_is_secret(self, monkeypatch):
        monkeypatch.setenv('ELASTIC_PASSWORD', 'changeme')

        settings = Settings(_env_file=None)

        assert 'changeme' not in repr(settings)
        assert settings.ELASTIC_PASSWORD.get_secret_value() == 'changeme'
