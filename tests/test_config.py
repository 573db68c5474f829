from pathlib import Path

import pytest

from genie.utils.config import DEV_JWT_SECRET, load_settings
from genie.utils.exceptions import ConfigError


def test_missing_file_uses_defaults(tmp_path: Path):
    settings = load_settings(tmp_path / "missing.yaml")
    assert settings.auth.org_domain == "techcurators.in"
    assert settings.server.port == 5002
    assert settings.cors.origins == ["http://localhost:8080", "http://localhost:3000"]


def test_env_substitution(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("ORG_DOMAIN", "acme.org")
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("JWT_SECRET_UNSET", raising=False)
    path = tmp_path / "settings.yaml"
    path.write_text(
        "server:\n"
        '  port: "${PORT:6000}"\n'
        "auth:\n"
        '  org_domain: "${ORG_DOMAIN:techcurators.in}"\n'
        '  jwt_secret: "${JWT_SECRET_UNSET}"\n',
        encoding="utf-8",
    )
    settings = load_settings(path)
    assert settings.auth.org_domain == "acme.org"
    assert settings.server.port == 6000
    assert settings.auth.jwt_secret == "${JWT_SECRET_UNSET}"


def test_settings_file_from_environment(tmp_path: Path, monkeypatch):
    path = tmp_path / "custom.yaml"
    path.write_text("storage:\n  data_dir: /srv/genie\n", encoding="utf-8")
    monkeypatch.setenv("GENIE_SETTINGS_FILE", str(path))
    assert load_settings().data_dir == Path("/srv/genie")


def test_shipped_settings_file_loads(monkeypatch):
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    path = Path(__file__).resolve().parent.parent / "config" / "settings.yaml"
    settings = load_settings(path)
    assert settings.app.name == "Assessment Genie"
    assert settings.google.userinfo_url.startswith("https://www.googleapis.com/")


@pytest.mark.parametrize(
    "content",
    ["- just\n- a list\n", "auth:\n  bcrypt_rounds: 2\n", "auth: [unclosed\n"],
)
def test_invalid_settings_raise_config_error(tmp_path: Path, content):
    path = tmp_path / "settings.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_settings(path)


def test_production_requires_real_secret(tmp_path: Path):
    path = tmp_path / "settings.yaml"
    path.write_text("app:\n  environment: production\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="JWT_SECRET"):
        load_settings(path)

    path.write_text(
        "app:\n  environment: production\nauth:\n  jwt_secret: a-real-production-secret-value-123\n",
        encoding="utf-8",
    )
    settings = load_settings(path)
    assert settings.is_production
    assert settings.auth.jwt_secret != DEV_JWT_SECRET
