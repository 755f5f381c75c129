from ecotracker.settings import Settings


def test_defaults(monkeypatch):
    for key in ("RAPIDAPI_KEY", "RAPIDAPI_HOST", "AIR_QUALITY_URL", "AIR_QUALITY_TIMEOUT", "PORT"):
        monkeypatch.delenv(key, raising=False)

    config = Settings.from_env()

    assert config.rapidapi_key is None
    assert config.rapidapi_host == "carbonfootprint1.p.rapidapi.com"
    assert config.air_quality_url.endswith("/AirQualityHealthIndex")
    assert config.air_quality_timeout == 10.0
    assert config.port == 5000


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("RAPIDAPI_KEY", "abc")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("AIR_QUALITY_TIMEOUT", "2.5")

    config = Settings.from_env()

    assert config.rapidapi_key == "abc"
    assert config.port == 8080
    assert config.air_quality_timeout == 2.5
