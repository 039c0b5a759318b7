import os

import matplotlib.pyplot as plt
import pytest

from simulations.charts import build_report_figure, build_spread_figure, plot_counts
from simulations.report import main
from simulations.run import run_convergence, run_report


def test_build_report_figure():
    results = run_report([10, 100, 1000])
    fig = build_report_figure(results)
    try:
        assert len(fig.axes) == 2 * 3 + 1
        assert fig.axes[-1].get_xscale() == "log"
    finally:
        plt.close(fig)


def test_counts_chart_shows_unseen_faces():
    fig, ax = plt.subplots()
    try:
        plot_counts(ax, run_report([10])[0])
        assert len(ax.patches) == 6
        assert [p.get_height() for p in ax.patches] == [2, 3, 2, 1, 0, 2]
    finally:
        plt.close(fig)


def test_build_spread_figure():
    fig = build_spread_figure(run_convergence([10, 100], range(5)))
    try:
        assert fig.axes[0].get_yscale() == "log"
    finally:
        plt.close(fig)


def test_empty_figures_rejected():
    with pytest.raises(ValueError):
        build_report_figure([])
    with pytest.raises(ValueError):
        build_spread_figure([])


def test_main_writes_charts(tmp_path, capsys):
    out = tmp_path / "charts"
    code = main(["--sizes", "10", "100", "--spread-seeds", "3", "--output-dir", str(out)])
    assert code == 0
    assert os.path.exists(out / "report.png")
    assert os.path.exists(out / "spread.png")

    printed = capsys.readouterr().out
    assert "N=10: mean=3.0000" in printed
    assert "N=100: runs=3" in printed


def test_main_without_spread(capsys):
    assert main(["--sizes", "10", "--spread-seeds", "0", "--no-show"]) == 0
    assert "runs=" not in capsys.readouterr().out


@pytest.mark.parametrize("argv", [
    ["--sizes", "0", "--no-show"],
    ["--sizes", "10", "--spread-seeds", "-1", "--no-show"],
])
def test_main_rejects_invalid_arguments(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2
