import pytest

from bcsh.session import SessionState


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    """Run the test from tmp_path; the original cwd is restored afterwards."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def session(tmp_path):
    return SessionState(environ={"HOME": str(tmp_path), "USER": "alice"})
