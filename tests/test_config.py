import pytest

from core.config import get_settings, _reset_settings_cache_for_tests


def test_defaults(monkeypatch) -> None:
    for name in ("LIVE24_BASE_URL", "LIVE24_MATCH_LIST_ID", "LIVE24_SUBTOURNAMENT_IDS", "LIVE24_MAX_ATTEMPTS"):
        monkeypatch.delenv(name, raising=False)
    _reset_settings_cache_for_tests()
    s = get_settings()
    assert s.live24_base_url == "https://24live.com/api"
    assert s.live24_match_list_id == 22
    assert s.live24_subtournament_ids == ["70521", "70503"]
    assert s.live24_h2h_limit == 5
    assert s.live24_max_attempts == 1


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("LIVE24_BASE_URL", "http://localhost:9000/api/")
    monkeypatch.setenv("LIVE24_SUBTOURNAMENT_IDS", " 1, ,2 ")
    monkeypatch.setenv("LIVE24_MAX_ATTEMPTS", "3")
    _reset_settings_cache_for_tests()
    s = get_settings()
    assert s.live24_base_url == "http://localhost:9000/api"
    assert s.live24_subtournament_ids == ["1", "2"]
    assert s.live24_max_attempts == 3


def test_invalid_int_raises(monkeypatch) -> None:
    monkeypatch.setenv("LIVE24_MATCH_LIST_ID", "abc")
    _reset_settings_cache_for_tests()
    with pytest.raises(ValueError) as exc:
        get_settings()
    assert "LIVE24_MATCH_LIST_ID" in str(exc.value)


def test_zero_attempts_rejected(monkeypatch) -> None:
    monkeypatch.setenv("LIVE24_MAX_ATTEMPTS", "0")
    _reset_settings_cache_for_tests()
    with pytest.raises(ValueError):
        get_settings()
