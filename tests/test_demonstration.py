import numpy as np
import pytest

from hoeffding_sim.config import ConfigurationError, get_rng
from hoeffding_sim.demonstration import (
    generate_bound_table,
    hoeffding_plot,
    main,
    parse_epsilons,
    run_demonstration,
)

EPS = (0.0, 0.1, 0.2, 0.3, 0.4, 0.5)


class RecordingRenderer:
    def __init__(self):
        self.calls = []
        self.finished = False

    def render(self, label, epsilons, empirical, theoretical):
        self.calls.append((label, tuple(epsilons), tuple(empirical), tuple(theoretical)))

    def finish(self):
        self.finished = True


def test_curves_and_means():
    result = run_demonstration(2000, 10, EPS, population_size=200, rng=get_rng(11))

    assert list(result.curves) == ["c_1", "c_rand", "c_min"]
    assert list(result.means) == ["c_1", "c_rand", "c_min"]
    for curve in result.curves.values():
        assert curve.epsilons == EPS
        assert len(curve.empirical) == len(EPS)
    assert result.means["c_min"] < result.means["c_1"]
    assert result.params.num_trials == 2000


def test_theoretical_curve_shared_across_coins():
    result = run_demonstration(200, 10, EPS, population_size=50, rng=get_rng(2))
    curves = list(result.curves.values())
    assert curves[0].theoretical == curves[1].theoretical == curves[2].theoretical
    assert curves[0].theoretical[0] == 2.0


def test_renderer_receives_each_coin():
    renderer = RecordingRenderer()
    result = run_demonstration(100, 10, EPS, population_size=50, rng=get_rng(4), renderer=renderer)

    assert [c[0] for c in renderer.calls] == ["c_1", "c_rand", "c_min"]
    assert renderer.finished
    label, eps, empirical, theoretical = renderer.calls[2]
    assert eps == EPS
    assert empirical == result.curves["c_min"].empirical
    assert theoretical == result.curves["c_min"].theoretical


def test_renderer_without_finish():
    class Minimal:
        def __init__(self):
            self.labels = []

        def render(self, label, epsilons, empirical, theoretical):
            self.labels.append(label)

    renderer = Minimal()
    run_demonstration(10, 5, EPS, population_size=10, rng=get_rng(1), renderer=renderer)
    assert renderer.labels == ["c_1", "c_rand", "c_min"]


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(num_trials=0),
        dict(num_flips=-2),
        dict(population_size=0),
        dict(epsilons=()),
        dict(epsilons=(0.1, -0.1)),
    ],
)
def test_configuration_errors_before_any_work(kwargs):
    rng = get_rng(8)
    state = rng.bit_generator.state
    renderer = RecordingRenderer()

    args = dict(num_trials=10, num_flips=10, epsilons=EPS, population_size=10)
    args.update(kwargs)
    with pytest.raises(ConfigurationError):
        run_demonstration(rng=rng, renderer=renderer, **args)

    assert rng.bit_generator.state == state
    assert renderer.calls == []


def test_same_seed_same_result():
    a = run_demonstration(300, 10, EPS, population_size=100, rng=get_rng(21))
    b = run_demonstration(300, 10, EPS, population_size=100, rng=get_rng(21))
    assert a.means == b.means
    assert a.curves == b.curves


def test_hoeffding_plot_returns_means():
    means = hoeffding_plot(num_trials=500, num_flips=10, epsilons=EPS, seed=10111)

    assert set(means) == {"c_1", "c_rand", "c_min"}
    assert means == hoeffding_plot(num_trials=500, num_flips=10, epsilons=EPS, seed=10111)
    assert all(isinstance(m, float) for m in means.values())


def test_bound_table():
    result = run_demonstration(100, 10, (0.0, 0.5), population_size=20, rng=get_rng(3))
    table = generate_bound_table(result)

    assert "P c_min" in table
    assert "Bound" in table
    assert "2.00000" in table
    assert len(table.splitlines()) == 4


def test_parse_epsilons():
    assert parse_epsilons("0,0.1, 0.25") == [0.0, 0.1, 0.25]
    assert parse_epsilons("0.5,") == [0.5]


def test_main_prints_report(capsys):
    assert main(["-n", "2000", "-p", "200", "--no-plot"]) == 0

    out = capsys.readouterr().out
    assert "Trials: 2,000" in out
    assert "P c_rand" in out
    assert "v for c_min" in out
    assert "✓ c_min: violated at eps" in out
    assert "⚠" not in out


def test_main_saves_figure(tmp_path, capsys):
    out = tmp_path / "plot.png"
    assert main(["-n", "200", "-p", "50", "--epsilons", "0,0.2,0.4", "-o", str(out)]) == 0
    assert out.exists()
    assert "Figure saved to" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [["-n", "0"], ["-f", "-1"], ["--epsilons", "abc"]])
def test_main_rejects_bad_arguments(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv + ["--no-plot"])
    assert exc.value.code == 2
