import pytest

from pos_firestoredb.utils.config import FirebaseConfig, get_config

FIREBASE_ENV = (
    "API_KEY",
    "AUTH_DOMAIN",
    "PROJECT_ID",
    "STORAGE_BUCKET",
    "MESSAGING_SENDER_ID",
    "APP_ID",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in FIREBASE_ENV:
        monkeypatch.delenv(f"FIREBASE_{name}", raising=False)
        monkeypatch.delenv(f"VITE_FIREBASE_{name}", raising=False)
    monkeypatch.delenv("GOOGLE_APPLICATION_CREDENTIALS", raising=False)
    get_config.cache_clear()
    yield monkeypatch
    get_config.cache_clear()


def test_reads_firebase_variables(clean_env):
    clean_env.setenv("FIREBASE_API_KEY", "key")
    clean_env.setenv("FIREBASE_AUTH_DOMAIN", "pos.firebaseapp.com")
    clean_env.setenv("FIREBASE_PROJECT_ID", "pos")
    clean_env.setenv("FIREBASE_APP_ID", "1:2:web:3")

    config = FirebaseConfig.from_env()

    assert config.api_key == "key"
    assert config.project_id == "pos"
    assert config.app_id == "1:2:web:3"
    assert config.is_configured()


def test_accepts_vite_prefixed_variables(clean_env):
    clean_env.setenv("VITE_FIREBASE_API_KEY", "key")
    clean_env.setenv("VITE_FIREBASE_AUTH_DOMAIN", "pos.firebaseapp.com")
    clean_env.setenv("VITE_FIREBASE_PROJECT_ID", "pos")

    assert FirebaseConfig.from_env().is_configured()


def test_reads_dotenv_file(clean_env, tmp_path):
    (tmp_path / ".env").write_text(
        "FIREBASE_API_KEY=key\nFIREBASE_AUTH_DOMAIN=pos.firebaseapp.com\nFIREBASE_PROJECT_ID=pos\n"
    )

    assert FirebaseConfig.from_env().project_id == "pos"


@pytest.mark.parametrize("missing", ["api_key", "auth_domain", "project_id"])
def test_first_three_values_are_required(missing):
    values = {"api_key": "key", "auth_domain": "pos.firebaseapp.com", "project_id": "pos", missing: ""}

    assert not FirebaseConfig(**values).is_configured()


def test_other_values_are_not_checked(clean_env):
    config = FirebaseConfig(api_key="key", auth_domain="pos.firebaseapp.com", project_id="pos")

    assert config.storage_bucket is None
    assert config.is_configured()


def test_get_config_is_cached(clean_env):
    assert get_config() is get_config()
