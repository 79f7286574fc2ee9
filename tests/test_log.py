from hfss_sweep.utils.log import init_logging


def test_level_from_env(monkeypatch, capsys):
    monkeypatch.setenv("HFSS_SWEEP_LOG_LEVEL", "warning")
    log = init_logging()
    log.info("quiet line")
    log.warning("loud line")
    err = capsys.readouterr().err
    assert "loud line" in err
    assert "quiet line" not in err


def test_argument_beats_env(monkeypatch, capsys):
    monkeypatch.setenv("HFSS_SWEEP_LOG_LEVEL", "ERROR")
    monkeypatch.setenv("HFSS_SWEEP_DEBUG", "1")
    log = init_logging("debug")
    log.debug("debug line")
    assert "debug line" in capsys.readouterr().err
