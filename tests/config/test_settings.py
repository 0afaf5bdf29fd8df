import yaml

from devfeedback.config.settings import Settings


def test_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    settings = Settings()

    assert settings.log_level == "WARNING"
    assert settings.log_file is None
    assert settings.reject_duplicate_developers is False
    assert settings.database_url.endswith("feedbackLoopDB.db")
    assert "~" not in settings.database_url


def test_yaml_config_loading(tmp_path, monkeypatch):
    """Test that settings are loaded from config.yaml."""
    config_data = {
        "database_url": "sqlite:////tmp/devfb_test.db",
        "reject_duplicate_developers": True,
    }
    (tmp_path / "config.yaml").write_text(yaml.dump(config_data))
    monkeypatch.chdir(tmp_path)

    settings = Settings()

    assert settings.database_url == "sqlite:////tmp/devfb_test.db"
    assert settings.reject_duplicate_developers is True


def test_yaml_config_override_env(tmp_path, monkeypatch):
    """Env vars take precedence over config.yaml."""
    (tmp_path / "config.yaml").write_text(yaml.dump({"log_level": "ERROR"}))
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DEVFB_LOG_LEVEL", "DEBUG")

    settings = Settings()

    assert settings.log_level == "DEBUG"


def test_malformed_yaml_is_ignored(tmp_path, monkeypatch):
    (tmp_path / "config.yaml").write_text("log_level: [unclosed")
    monkeypatch.chdir(tmp_path)

    settings = Settings()

    assert settings.log_level == "WARNING"


def test_sqlite_url_expands_home(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))

    settings = Settings(database_url="sqlite:///~/data/fb.db")

    assert settings.database_url == f"sqlite:///{tmp_path}/data/fb.db"


def test_memory_url_untouched(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    settings = Settings(database_url="sqlite:///:memory:")
    assert settings.database_url == "sqlite:///:memory:"


def test_ensure_directories(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    settings = Settings(
        database_url=f"sqlite:///{tmp_path / 'db' / 'fb.db'}",
        log_file=str(tmp_path / "logs" / "fb.log"),
    )

    settings.ensure_directories()

    assert (tmp_path / "db").is_dir()
    assert (tmp_path / "logs").is_dir()
