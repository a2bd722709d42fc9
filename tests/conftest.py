import pytest

SECRET_VARIABLES = ("PRIVATE_KEY", "SEPOLIA_URL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Run every test with no deploy secrets and no stray .env file."""
    monkeypatch.chdir(tmp_path)
    for name in SECRET_VARIABLES:
        # setenv first so anything load_dotenv writes is removed on teardown
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    return tmp_path
