import pytest

from hotelres.adapters import JsonFileSnapshotAdapter, SQLiteSnapshotAdapter
from hotelres.config import EnvironmentHotelResConfig, _import_config_class, get_config, set_config
from hotelres.exceptions import ConfigurationError


class TestEnvironmentConfig:
    """Test suite for environment-backed configuration."""

    def test_defaults(self, monkeypatch):
        for key in ("DATABASE_URL", "PAYMENT_DELAY_SECONDS", "HOTEL_NAME", "LOG_LEVEL"):
            monkeypatch.delenv(key, raising=False)
        config = EnvironmentHotelResConfig()

        assert config.get_database_url() == "sqlite:///hotelres.db"
        assert config.get_payment_delay_seconds() == 1.5
        assert config.get_hotel_display_name() == "Hotel Reservation System"
        assert config.get_log_level() == "INFO"

    def test_invalid_payment_delay_falls_back(self, monkeypatch):
        monkeypatch.setenv("PAYMENT_DELAY_SECONDS", "soon")
        assert EnvironmentHotelResConfig().get_payment_delay_seconds() == 1.5

    def test_sqlite_adapter_selected(self, monkeypatch, tmp_path):
        monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'h.db'}")
        assert isinstance(EnvironmentHotelResConfig().create_adapter(), SQLiteSnapshotAdapter)

    def test_json_adapter_selected(self, monkeypatch, tmp_path):
        monkeypatch.setenv("DATABASE_URL", f"file://{tmp_path / 'data'}")
        adapter = EnvironmentHotelResConfig().create_adapter()
        assert isinstance(adapter, JsonFileSnapshotAdapter)
        assert (tmp_path / "data").is_dir()

    def test_unsupported_url(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgres://localhost/hotel")
        with pytest.raises(ConfigurationError):
            EnvironmentHotelResConfig().create_adapter()

    def test_create_system_seeds_rooms(self, monkeypatch, tmp_path):
        monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'h.db'}")
        monkeypatch.setenv("PAYMENT_DELAY_SECONDS", "0")

        system = EnvironmentHotelResConfig().create_system()

        assert system.catalog.count_available() == 13
        assert system.ledger.payment_processor.delay_seconds == 0


@pytest.mark.parametrize("path", ["nodots", "hotelres.missing_module.Cls", "hotelres.config.Nope", "hotelres.config.get_config"])
def test_bad_config_class_paths(path):
    with pytest.raises(ConfigurationError):
        _import_config_class(path)


def test_get_config_uses_env_class(monkeypatch):
    set_config(None)
    monkeypatch.setenv("HOTELRES_CONFIG", "hotelres.config.EnvironmentHotelResConfig")
    try:
        assert isinstance(get_config(), EnvironmentHotelResConfig)
    finally:
        set_config(None)


def test_main_logs_bad_config_class(monkeypatch, caplog):
    from hotelres.main import main

    set_config(None)
    monkeypatch.setenv("HOTELRES_CONFIG", "hotelres.config.Nope")
    try:
        with pytest.raises(SystemExit) as excinfo:
            main()
    finally:
        set_config(None)

    assert excinfo.value.code == 1
    assert "System Error" in caplog.text
