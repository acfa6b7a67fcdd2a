"""
Test cases for the demo driver
"""

import json

import pytest

from stock_portfolio.config import SimulationConfig
from stock_portfolio.demo import main, run_simulation


def test_run_simulation_final_state(fixed_rng, capsys):
    """With a zero market move the final state is fully determined"""
    portfolio = run_simulation(SimulationConfig(seed=1), rng=fixed_rng(0))

    assert [s.ticker for s in portfolio.get_holdings()] == ["GOOG", "BND"]
    assert portfolio.get_stock("GOOG").quantity == 5
    assert portfolio.get_stock("BND").price == 82.0
    # 50000 - 35500 - 3100 + 10250 + 70 * 150
    assert portfolio.get_cash_balance() == pytest.approx(32150.0)

    out = capsys.readouterr().out
    assert "Initial Portfolio:" in out
    assert "After selling 5 GOOG shares:" in out
    assert "After removing AAPL:" in out
    assert "Full Transaction History:" in out


def test_run_simulation_seeded_is_reproducible(capsys):
    """The same seed gives the same final prices"""
    first = run_simulation(SimulationConfig(seed=2024))
    second = run_simulation(SimulationConfig(seed=2024))

    assert [s.price for s in first.get_holdings()] == [s.price for s in second.get_holdings()]


def test_histories_record_every_step(fixed_rng, capsys):
    """GOOG and BND histories reflect the fixed script"""
    portfolio = run_simulation(SimulationConfig(), rng=fixed_rng(10))

    goog = [t.transaction_type.name for t in portfolio.get_stock("GOOG").history]
    bnd = [t.transaction_type.name for t in portfolio.get_stock("BND").history]
    assert goog == ["BUY", "SELL", "PRICE_UPDATE"]
    assert bnd == ["BUY", "PRICE_UPDATE", "PRICE_UPDATE"]


def test_main_succeeds(capsys):
    """The driver exits cleanly"""
    assert main(["--seed", "7", "--log-level", "WARNING"]) == 0
    assert "Full Transaction History:" in capsys.readouterr().out


def test_main_with_config_file(tmp_path, capsys):
    """Settings are read from the config file"""
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"portfolio_name": "College Fund", "seed": 3}))

    assert main(["--config", str(path)]) == 0
    assert "Portfolio: College Fund" in capsys.readouterr().out


def test_main_reports_failure(tmp_path, capsys):
    """Errors escaping the run give exit code 1"""
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"initial_cash": -5}))

    assert main(["--config", str(path)]) == 1
    assert "Simulation failed" in capsys.readouterr().out
