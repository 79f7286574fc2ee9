import io, pathlib, textwrap

import pytest

HERE = pathlib.Path(__file__).resolve().parent
REPO = HERE.parent


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def tmp_run(tmp_path):
    d = tmp_path / "run"
    d.mkdir()
    return d


@pytest.fixture
def sample_toml(tmp_path):
    p = tmp_path / "sweeps.sample.toml"
    p.write_text(textwrap.dedent(
        """\
        [script]
        units = "mm"

        [[sweep]]
        name = "ParSetup1"
        analysis = "MySetup"
        [[sweep.variable]]
        name = "var"
        kind = "LIN"
        data = [1, 9, 1]

        [[sweep]]
        name = "ParSetup3"
        analysis = "MySetup"
        units = "rad"
        [[sweep.variable]]
        name = "pC"
        kind = "SINGLE"
        data = [3.5, 10, -1.25]
        sync = 1
        [[sweep.variable]]
        name = "pD"
        kind = "LINC"
        data = [0.1, 3.5, 18]
        sync = 1
    """
    ))
    return p
