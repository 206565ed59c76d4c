from lead_capture.api.dependencies import get_settings
from lead_capture.config import DEFAULT_PORT, Settings


def test_port_from_env(monkeypatch):
    monkeypatch.setenv("LEAD_CAPTURE_PORT", "9100")
    assert Settings.from_env().port == 9100


def test_non_numeric_port_falls_back(monkeypatch):
    monkeypatch.setenv("LEAD_CAPTURE_PORT", "eighty")
    assert Settings.from_env().port == DEFAULT_PORT


def test_liveness_survives_bad_port(client, monkeypatch):
    monkeypatch.setenv("LEAD_CAPTURE_PORT", "not-a-port")
    monkeypatch.setenv("LEAD_EVENT_NAME", "Expo 2027")
    get_settings.cache_clear()
    try:
        resp = client.get("/")
    finally:
        get_settings.cache_clear()
    assert resp.status_code == 200
    assert resp.json() == {
        "status": "ok",
        "message": "Expo 2027 Lead Capture endpoint is live. Use POST to submit leads.",
    }


def test_folder_name_defaults_from_event():
    assert Settings(event_name="Expo").folder_name == "Expo Photos"
    assert Settings(event_name="Expo", photo_folder="Cards").folder_name == "Cards"
