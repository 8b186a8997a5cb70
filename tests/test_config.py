from tripcal.config import load_config


def test_missing_config_uses_defaults(tmp_path):
    cfg = load_config(str(tmp_path / "absent.yaml"))

    assert cfg.timezone == "UTC"
    assert cfg.display.time_format == "%-I:%M %p"
    assert cfg.display.empty_message == "No events scheduled. Press + to add one."
    assert cfg.form.default_start == "09:00"


def test_config_overrides(tmp_path):
    cfg_path = tmp_path / "tripcal.yaml"
    cfg_path.write_text(
        """
        timezone: 'Europe/Lisbon'
        display:
          time_format: '%H:%M'
        form:
          default_start: '08:00'
          default_end: '09:00'
        """,
        encoding="utf-8",
    )

    cfg = load_config(str(cfg_path))

    assert cfg.timezone == "Europe/Lisbon"
    assert cfg.display.time_format == "%H:%M"
    assert cfg.display.empty_message == "No events scheduled. Press + to add one."
    assert cfg.form.default_end == "09:00"


def test_empty_config_file_uses_defaults(tmp_path):
    cfg_path = tmp_path / "tripcal.yaml"
    cfg_path.write_text("", encoding="utf-8")

    assert load_config(str(cfg_path)).timezone == "UTC"
