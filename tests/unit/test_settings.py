"""
Test suite for configuration loading from the environment.

System role: Verification of settings defaults and env mapping
"""

import pytest

from ragchat.configs import DatabaseSettings, EmbeddingSettings, ProviderSettings, RagSettings, Settings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run each test away from any local .env file and provider variables."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "DEEPSEEK_API_KEY",
        "DEEPSEEK_BASE_URL",
        "DEEPSEEK_MODEL",
        "DEEPSEEK_TIMEOUT_MS",
        "SYSTEM_PROMPT",
        "EMBEDDING_BASE_URL",
        "EMBEDDING_API_KEY",
        "EMBEDDING_MODEL",
        "RAG_DB_PATH",
        "RAG_TOP_K",
        "PORT",
        "LOG_LEVEL",
        "CORS_ORIGINS",
    ):
        monkeypatch.delenv(name, raising=False)


class TestProviderSettings:
    """Test suite for ProviderSettings."""

    def test_defaults_should_target_deepseek(self):
        settings = ProviderSettings()

        assert settings.api_key is None
        assert settings.base_url == "https://api.deepseek.com"
        assert settings.model == "deepseek-chat"
        assert settings.timeout_ms == 20000

    @pytest.mark.parametrize("raw", ['"sk-123"', "'sk-123'", "  sk-123  "])
    def test_api_key_should_be_unquoted(self, monkeypatch, raw):
        monkeypatch.setenv("DEEPSEEK_API_KEY", raw)

        assert ProviderSettings().api_key == "sk-123"

    def test_blank_api_key_should_count_as_missing(self, monkeypatch):
        monkeypatch.setenv("DEEPSEEK_API_KEY", '""')

        assert ProviderSettings().api_key is None

    def test_system_prompt_should_read_unprefixed_variable(self, monkeypatch):
        monkeypatch.setenv("SYSTEM_PROMPT", "Answer in French.")

        assert ProviderSettings().system_prompt == "Answer in French."

    def test_base_url_trailing_slash_should_be_removed(self, monkeypatch):
        monkeypatch.setenv("DEEPSEEK_BASE_URL", "https://llm.example/v1/")

        assert ProviderSettings().base_url == "https://llm.example/v1"

    def test_non_positive_timeout_should_be_rejected(self, monkeypatch):
        monkeypatch.setenv("DEEPSEEK_TIMEOUT_MS", "0")

        with pytest.raises(ValueError):
            ProviderSettings()


class TestOtherSettings:
    """Test suite for embedding, retrieval and database settings."""

    def test_embedding_defaults(self):
        settings = EmbeddingSettings()

        assert settings.base_url is None
        assert settings.model == "BAAI/bge-m3"

    def test_rag_defaults(self):
        settings = RagSettings()

        assert (settings.chunk_max_chars, settings.chunk_overlap_chars, settings.top_k) == (800, 120, 4)
        assert settings.max_top_k == 10

    def test_db_path_should_come_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("RAG_DB_PATH", str(tmp_path / "chunks.sqlite"))

        settings = DatabaseSettings()

        assert settings.async_database_url == f"sqlite+aiosqlite:///{tmp_path / 'chunks.sqlite'}"

    def test_memory_database_url(self):
        assert DatabaseSettings(path=":memory:").async_database_url == "sqlite+aiosqlite:///:memory:"

    def test_port_should_default_to_4000(self):
        assert Settings().port == 4000

    def test_log_level_should_be_normalized(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", " debug ")

        assert Settings().log_level == "DEBUG"

    def test_unknown_log_level_should_be_rejected(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")

        with pytest.raises(ValueError):
            Settings()

    def test_cors_origins_should_default_to_any(self):
        assert Settings().cors_origins == ["*"]
