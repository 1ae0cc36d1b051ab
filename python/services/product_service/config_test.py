from product_service.config import Settings

ENV_VARS = (
    "SERVICE_NAME",
    "APP_TITLE",
    "APP_VERSION",
    "LOG_LEVEL",
    "LOG_FILE",
    "HOST",
    "PORT",
    "RELOAD",
)


def test_defaults(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    config = Settings()
    assert config.service_name == "product-service"
    assert config.title == "Product Service"
    assert config.version == "0.3.0"
    assert config.log_level == "INFO"
    assert config.log_file is None
    assert config.host == "0.0.0.0"
    assert config.port == 8000
    assert config.reload is False


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("APP_VERSION", "1.2.3")
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "9001")
    monkeypatch.setenv("RELOAD", "yes")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_FILE", "/tmp/products.log")

    config = Settings()
    assert config.version == "1.2.3"
    assert config.host == "127.0.0.1"
    assert config.port == 9001
    assert config.reload is True
    assert config.log_level == "DEBUG"
    assert config.log_file == "/tmp/products.log"
