import pytest

from clientes_app.config import MISSING_SETTINGS_MESSAGE, ConfigError, load_settings


def test_load_settings_reads_both_values():
    settings = load_settings({"SUPABASE_URL": "https://x.supabase.co", "SUPABASE_ANON_KEY": "anon"})
    assert settings.supabase_url == "https://x.supabase.co"
    assert settings.supabase_key == "anon"
    assert settings.log_level == "INFO"


def test_vite_names_accepted_as_fallback():
    settings = load_settings({"VITE_SUPABASE_URL": "https://y.supabase.co", "VITE_SUPABASE_ANON_KEY": "k"})
    assert settings.supabase_url == "https://y.supabase.co"
    assert settings.supabase_key == "k"


@pytest.mark.parametrize("environ", [
    {},
    {"SUPABASE_URL": "https://x.supabase.co"},
    {"SUPABASE_ANON_KEY": "anon"},
    {"SUPABASE_URL": "  ", "SUPABASE_ANON_KEY": "anon"},
])
def test_missing_value_fails_fast(environ):
    with pytest.raises(ConfigError) as excinfo:
        load_settings(environ)
    assert str(excinfo.value) == MISSING_SETTINGS_MESSAGE


def test_dotenv_file_loaded_without_override(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    # set-then-delete so teardown removes whatever the dotenv file wrote
    for name in ("SUPABASE_URL", "VITE_SUPABASE_URL", "SUPABASE_ANON_KEY", "VITE_SUPABASE_ANON_KEY", "LOG_LEVEL"):
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    monkeypatch.setenv("SUPABASE_ANON_KEY", "from-env")
    (tmp_path / ".env.local").write_text("SUPABASE_URL=https://file.supabase.co\nSUPABASE_ANON_KEY=from-file\n")

    settings = load_settings()
    assert settings.supabase_url == "https://file.supabase.co"
    assert settings.supabase_key == "from-env"


def test_log_level_normalized():
    settings = load_settings({"SUPABASE_URL": "https://x.supabase.co", "SUPABASE_ANON_KEY": "anon", "LOG_LEVEL": " debug "})
    assert settings.log_level == "DEBUG"


def test_invalid_log_level_rejected():
    with pytest.raises(ConfigError) as excinfo:
        load_settings({"SUPABASE_URL": "https://x.supabase.co", "SUPABASE_ANON_KEY": "anon", "LOG_LEVEL": "verbose"})
    assert "VERBOSE" in str(excinfo.value)
