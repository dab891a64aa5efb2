import dataclasses

import pytest

from tx3_sdk.config import DEFAULT_TIMEOUT, ClientOptions


def test_defaults() -> None:
    opts = ClientOptions(endpoint="http://localhost:8164")
    assert opts.effective_timeout == DEFAULT_TIMEOUT == 30.0
    assert dict(opts.headers) == {}
    assert dict(opts.env_args) == {}


def test_zero_timeout_means_default() -> None:
    assert ClientOptions(endpoint="http://x", timeout=0).effective_timeout == 30.0
    assert ClientOptions(endpoint="http://x", timeout=2.5).effective_timeout == 2.5


@pytest.mark.parametrize("endpoint", ["", "localhost:8164", "ftp://host/trp"])
def test_invalid_endpoint(endpoint: str) -> None:
    with pytest.raises(ValueError):
        ClientOptions(endpoint=endpoint)


def test_negative_timeout() -> None:
    with pytest.raises(ValueError):
        ClientOptions(endpoint="https://x", timeout=-1)


def test_duplicate_headers_case_insensitive() -> None:
    with pytest.raises(ValueError, match="duplicate header"):
        ClientOptions(endpoint="http://x", headers={"X-Api-Key": "a", "x-api-key": "b"})


def test_options_are_immutable() -> None:
    headers = {"dmtr-api-key": "secret"}
    env = {"network": "preview"}
    opts = ClientOptions(endpoint="http://x", headers=headers, env_args=env)

    headers["other"] = "1"
    env["extra"] = 1
    assert dict(opts.headers) == {"dmtr-api-key": "secret"}
    assert dict(opts.env_args) == {"network": "preview"}

    with pytest.raises(dataclasses.FrozenInstanceError):
        opts.endpoint = "http://y"  # type: ignore[misc]
    with pytest.raises(TypeError):
        opts.headers["other"] = "1"  # type: ignore[index]


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TX3_TRP_ENDPOINT", "https://trp.example/api")
    monkeypatch.setenv("TX3_TRP_TIMEOUT", "12.5")
    monkeypatch.setenv("TX3_TRP_HEADERS", '{"dmtr-api-key": "k"}')
    monkeypatch.setenv("TX3_TRP_ENV", '{"network": "preview", "fee": 2}')

    opts = ClientOptions.from_env()
    assert opts.endpoint == "https://trp.example/api"
    assert opts.effective_timeout == 12.5
    assert dict(opts.headers) == {"dmtr-api-key": "k"}
    assert dict(opts.env_args) == {"network": "preview", "fee": 2}


def test_from_env_requires_endpoint(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TX3_TRP_ENDPOINT", raising=False)
    with pytest.raises(ValueError, match="TX3_TRP_ENDPOINT"):
        ClientOptions.from_env()


def test_from_env_rejects_non_object_json(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MY_ENDPOINT", "http://x")
    monkeypatch.setenv("MY_HEADERS", "[1, 2]")
    with pytest.raises(ValueError, match="MY_HEADERS"):
        ClientOptions.from_env(prefix="MY_")


def test_with_overrides() -> None:
    base = ClientOptions(endpoint="http://x", headers={"a": "1"})
    other = base.with_overrides(timeout=5, bogus=True)
    assert other.effective_timeout == 5
    assert dict(other.headers) == {"a": "1"}
    assert base.timeout is None
