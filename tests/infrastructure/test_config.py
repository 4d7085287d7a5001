"""Tests for settings loading and the composition root."""

from pathlib import Path

from upvote.application.order_history import PageResetPolicy
from upvote.infrastructure.bootstrap import (
    account_repository,
    order_history_view,
    order_repository,
)
from upvote.infrastructure.config import Settings
from upvote.infrastructure.http.http_account_repository import HttpAccountRepository
from upvote.infrastructure.http.http_order_repository import HttpOrderRepository
from upvote.infrastructure.persistence.json_account_repository import (
    JsonAccountRepository,
)
from upvote.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from tests.fakes import RecordingNotifier


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("API_BASE_URL", "PAGE_SIZE", "PAGE_RESET_POLICY", "DATA_DIR"):
            monkeypatch.delenv(f"UPVOTE_{name}", raising=False)
        settings = Settings(_env_file=None)
        assert settings.api_base_url is None
        assert settings.page_size == 10
        assert settings.page_reset_policy is PageResetPolicy.KEEP
        assert settings.data_dir == Path("data")

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("UPVOTE_PAGE_SIZE", "25")
        monkeypatch.setenv("UPVOTE_PAGE_RESET_POLICY", "reset")
        settings = Settings(_env_file=None)
        assert settings.page_size == 25
        assert settings.page_reset_policy is PageResetPolicy.RESET


class TestBootstrap:

    def test_json_repositories_without_api(self, tmp_path):
        settings = Settings(_env_file=None, api_base_url=None, data_dir=tmp_path)
        assert isinstance(order_repository(settings), JsonOrderRepository)
        assert isinstance(account_repository(settings), JsonAccountRepository)

    def test_http_repositories_with_api(self, tmp_path):
        settings = Settings(_env_file=None, api_base_url="https://api.example.com")
        assert isinstance(order_repository(settings), HttpOrderRepository)
        assert isinstance(account_repository(settings), HttpAccountRepository)

    def test_view_uses_configured_page_size(self, tmp_path):
        settings = Settings(_env_file=None, data_dir=tmp_path, page_size=5)
        view = order_history_view(settings, RecordingNotifier())
        assert view.current_page().page_size == 5
