import pathlib
import pytest
import tempfile

from click.testing import CliRunner

@pytest.fixture()
def cwd(monkeypatch):
    """Run the test in an empty working directory."""
    with tempfile.TemporaryDirectory() as cwd:
        monkeypatch.chdir(cwd)
        yield pathlib.Path(cwd)

@pytest.fixture()
def runner(cwd):
    return CliRunner()
