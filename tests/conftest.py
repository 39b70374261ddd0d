"""Shared fixtures for e2e_dsl tests."""

from pathlib import Path

import pytest

LOGIN_DSL = '''\
// Login flow
scenario "User Login" {
    description "Log in with valid credentials"
    url "https://example.com/login"
    tags ["auth", "smoke"]
    priority critical

    step "Enter username" {
        type #1 "alice" clearFirst
        expect "Username is filled"
    }

    step "Enter password" {
        type #2 "secret" pressEnter
        timeout 3000
        retry 2
    }

    step "Wait for dashboard" {
        wait urlContains "/dashboard" timeout 8000
    }

    step "Check greeting" {
        assert #5 textContains "Welcome"
        continueOnFailure
    }
}
'''


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep the user's home config and environment out of every test."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("E2E_DSL_CONFIG", raising=False)
    monkeypatch.delenv("E2E_DSL_LOG_LEVEL", raising=False)
    return home


@pytest.fixture()
def login_dsl() -> str:
    return LOGIN_DSL


@pytest.fixture()
def scenario_file(tmp_path: Path) -> Path:
    path = tmp_path / "login.e2e"
    path.write_text(LOGIN_DSL, encoding="utf-8")
    return path
