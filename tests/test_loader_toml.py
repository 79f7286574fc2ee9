import textwrap

import pytest

from hfss_sweep import ConfigError, SweepKind, UnsupportedKindError, render_sweep_analysis
from hfss_sweep.config.settings import SweepSettings
from hfss_sweep.io.loader import resolve_toml, specs_from_dict


def test_resolve_toml_minimal(sample_toml):
    specs = resolve_toml(str(sample_toml))

    assert [s.name for s in specs] == ["ParSetup1", "ParSetup3"]
    first, second = specs
    assert first.units == "mm"
    assert first.variables[0].kind is SweepKind.LIN
    assert first.variables[0].values == (1, 9, 1)
    assert first.variables[0].synchronize == 0

    assert second.units == "rad"
    assert [v.variable for v in second.variables] == ["pC", "pD"]
    assert [v.synchronize for v in second.variables] == [1, 1]


def test_resolved_setup_renders_like_direct_call(sample_toml):
    import io
    from hfss_sweep import emit

    first = resolve_toml(str(sample_toml))[0]
    buf = io.StringIO()
    emit(buf, "ParSetup1", "MySetup", "LIN", "var", [1, 9, 1], "mm")
    assert render_sweep_analysis(first) == buf.getvalue()


def test_units_fall_back_to_settings():
    data = {"sweep": [{"name": "P", "analysis": "S",
                       "variable": [{"name": "x", "kind": "LIN", "data": [0, 1, 0.5]}]}]}
    spec, = specs_from_dict(data, default_units=SweepSettings(default_units="um").default_units)
    assert spec.units == "um"
    assert "LIN 0.000000um 1.000000um 0.500000um" in spec.render()


def test_settings_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("HFSS_SWEEP__DEFAULT_UNITS", "cm")
    monkeypatch.setenv("HFSS_SWEEP__LOG_LEVEL", "debug")
    settings = SweepSettings()
    assert settings.default_units == "cm"
    assert settings.log_level == "DEBUG"

    p = tmp_path / "s.toml"
    p.write_text('[[sweep]]\nname = "P"\nanalysis = "S"\n'
                 '[[sweep.variable]]\nname = "x"\nkind = "LINC"\ndata = [0, 1, 11]\n')
    spec, = resolve_toml(str(p))
    assert spec.units == "cm"


@pytest.mark.parametrize(
    "body, message",
    [
        ('[script]\nunits = "mm"\n', "at least one"),
        ('[[sweep]]\nanalysis = "S"\n', "name"),
        ('[[sweep]]\nname = "P"\nanalysis = "S"\n', "no \\[\\[sweep.variable\\]\\]"),
        ('[[sweep]]\nname = "P"\nanalysis = "S"\n[[sweep.variable]]\nname = "x"\nkind = "LIN"\n', "data"),
        ('[[sweep]]\nname = "P"\nanalysis = "S"\n[[sweep.variable]]\nname = "x"\nkind = "LIN"\n'
         'data = [0, "a", 1]\n', "numeric"),
        ("[[sweep]\n", "Invalid TOML"),
        ('script = "mm"\n[[sweep]]\nname = "P"\nanalysis = "S"\n', "must be a table"),
    ],
)
def test_malformed_config(tmp_path, body, message):
    p = tmp_path / "bad.toml"
    p.write_text(body)
    with pytest.raises(ConfigError, match=message):
        resolve_toml(str(p))


def test_unknown_kind_in_config(tmp_path):
    p = tmp_path / "bad.toml"
    p.write_text(textwrap.dedent(
        """\
        [[sweep]]
        name = "P"
        analysis = "S"
        [[sweep.variable]]
        name = "x"
        kind = "QUAD"
        data = [0, 1, 2]
        """
    ))
    with pytest.raises(UnsupportedKindError):
        resolve_toml(str(p))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        resolve_toml(str(tmp_path / "nope.toml"))
