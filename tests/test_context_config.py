"""Tests para el contexto de sesión y la configuración."""

import json

import pytest

from dynaform.config import DEFAULT_BASE_URL, Settings, load_settings
from dynaform.context import ContextStore, SessionContext
from dynaform.errors import DynaformError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("DYNAFORM_BASE_URL", raising=False)
    monkeypatch.delenv("DYNAFORM_TIMEOUT", raising=False)


class TestSessionContext:
    """Tests para SessionContext."""

    def test_payload_uses_service_keys(self):
        """Test claves del cuerpo JSON."""
        ctx = SessionContext(roll_number="7", name="Grace")
        assert ctx.to_payload() == {"rollNumber": "7", "name": "Grace"}

    def test_alias_input(self):
        """Test construcción con la clave del servicio."""
        assert SessionContext.model_validate({"rollNumber": "7"}).roll_number == "7"

    def test_empty_roll_number(self):
        """Test matrícula vacía."""
        with pytest.raises(ValueError):
            SessionContext(roll_number="")


class TestContextStore:
    """Tests para ContextStore."""

    def test_save_and_load(self, tmp_path):
        """Test guardar y recuperar el contexto."""
        store = ContextStore(tmp_path / "data")
        path = store.save(SessionContext(roll_number="7", name="Grace"))
        assert path.exists()
        loaded = store.load()
        assert loaded.roll_number == "7"
        assert loaded.name == "Grace"

    def test_load_missing(self, tmp_path):
        """Test sin sesión guardada."""
        assert ContextStore(tmp_path).load() is None

    def test_load_corrupt(self, tmp_path):
        """Test archivo de sesión ilegible."""
        store = ContextStore(tmp_path)
        store.path.write_text("{broken", encoding="utf-8")
        assert store.load() is None

    def test_load_invalid_content(self, tmp_path):
        """Test archivo sin matrícula."""
        store = ContextStore(tmp_path)
        store.path.write_text(json.dumps({"name": "x"}), encoding="utf-8")
        assert store.load() is None

    def test_clear(self, tmp_path):
        """Test cierre de sesión."""
        store = ContextStore(tmp_path)
        store.save(SessionContext(roll_number="7"))
        assert store.clear() is True
        assert store.load() is None
        assert store.clear() is False


class TestLoadSettings:
    """Tests para load_settings."""

    def test_defaults(self, tmp_path):
        """Test valores por defecto sin archivo."""
        settings = load_settings(data_dir=tmp_path)
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.timeout_s == 30.0
        assert settings.data_dir == tmp_path
        assert settings.theme == "default"

    def test_config_file(self, tmp_path):
        """Test lectura de config.json."""
        (tmp_path / "config.json").write_text(
            json.dumps({"base_url": "http://localhost:8000/", "theme": "nord"}),
            encoding="utf-8",
        )
        settings = load_settings(data_dir=tmp_path)
        assert settings.base_url == "http://localhost:8000"
        assert settings.theme == "nord"

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        """Test que el entorno tiene prioridad sobre el archivo."""
        (tmp_path / "config.json").write_text(
            json.dumps({"base_url": "http://localhost:8000", "timeout_s": 3}),
            encoding="utf-8",
        )
        monkeypatch.setenv("DYNAFORM_BASE_URL", "https://staging.example.com")
        monkeypatch.setenv("DYNAFORM_TIMEOUT", "12.5")
        settings = load_settings(data_dir=tmp_path)
        assert settings.base_url == "https://staging.example.com"
        assert settings.timeout_s == 12.5

    def test_explicit_path(self, tmp_path):
        """Test archivo de configuración explícito."""
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"timeout_s": 4}), encoding="utf-8")
        assert load_settings(path=path, data_dir=tmp_path).timeout_s == 4

    def test_invalid_url(self, tmp_path, monkeypatch):
        """Test URL sin esquema http(s)."""
        monkeypatch.setenv("DYNAFORM_BASE_URL", "ftp://example.com")
        with pytest.raises(DynaformError, match="Invalid configuration"):
            load_settings(data_dir=tmp_path)

    def test_invalid_timeout(self, tmp_path):
        """Test timeout no positivo."""
        (tmp_path / "config.json").write_text(json.dumps({"timeout_s": 0}), encoding="utf-8")
        with pytest.raises(DynaformError):
            load_settings(data_dir=tmp_path)

    def test_invalid_json(self, tmp_path):
        """Test config.json ilegible."""
        (tmp_path / "config.json").write_text("{", encoding="utf-8")
        with pytest.raises(DynaformError, match="Invalid configuration"):
            load_settings(data_dir=tmp_path)

    def test_settings_model(self):
        """Test validación directa del modelo."""
        assert Settings(base_url=" https://a.example.com/ ").base_url == "https://a.example.com"
