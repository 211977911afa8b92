"""
CLI tests
"""

import json

import pytest

from .. import cli
from ..config import settings
from ..constants import TICKS_PAGE_SIZE
from ..data.graph_client import set_client
from . import responses
from .fakes import FakeClient


@pytest.fixture
def clients():
    info = FakeClient(responses.POOL_RESPONSE)
    farming = FakeClient(responses.ETERNAL_FARMINGS_RESPONSE)
    set_client("info", info)
    set_client("farming", farming)
    return info, farming


def test_pool(clients, capsys):
    assert cli.main(["pool", responses.POOL_ADDRESS]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["fee"] == 500
    assert out["token0"]["symbol"] == "WMATIC"


def test_farmings(clients, capsys):
    assert cli.main(["farmings"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out[0]["tier1_multiplier"] == 11000


def test_pool_positions_passes_min_range_length(clients, capsys):
    _, farming = clients
    farming.bodies = [responses.POSITIONS_FOR_POOL_RESPONSE]
    assert cli.main(["pool-positions", responses.ACCOUNT, responses.POOL_ADDRESS,
                     "--min-range-length", "1200"]) == 0
    assert farming.last_variables["minRangeLength"] == 1200


def test_ticks_single_page(clients, capsys):
    info, _ = clients
    info.bodies = [responses.TICKS_RESPONSE]
    assert cli.main(["ticks", responses.POOL_ADDRESS, "--lower", "-60", "--upper", "60"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert [t["tick_idx"] for t in out] == [-60, 0, 60]
    assert info.last_variables["tickIdxLowerBound"] == -60


def test_not_found_prints_null(clients, capsys):
    info, _ = clients
    info.bodies = [responses.POOL_NOT_FOUND]
    assert cli.main(["pool", "0xdead"]) == 0
    assert capsys.readouterr().out.strip() == "null"


def test_client_error_exit_status(clients):
    _, farming = clients
    farming.bodies = [responses.GRAPHQL_ERROR_RESPONSE]
    assert cli.main(["positions", responses.ACCOUNT]) == 1


def test_ticks_all_follows_pages(clients, capsys):
    info, _ = clients
    full_page = {"data": {"ticks": [responses.make_tick(i) for i in range(TICKS_PAGE_SIZE)]}}
    info.bodies = [full_page, responses.TICKS_RESPONSE]
    assert cli.main(["ticks", responses.POOL_ADDRESS, "--all", "--skip", "700"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert len(out) == TICKS_PAGE_SIZE + 3
    assert [v["skip"] for _, v in info.calls] == [0, TICKS_PAGE_SIZE]


def test_ticks_error_is_logged(clients, capsys, caplog):
    info, _ = clients
    info.bodies = [responses.TICKS_PARTIAL_RESPONSE]
    info.error_policy = "all"
    assert cli.main(["ticks", responses.POOL_ADDRESS]) == 0
    out = json.loads(capsys.readouterr().out)
    assert [t["tick_idx"] for t in out] == [-60]
    assert "Ticks returned with error" in caplog.text


def test_invalid_log_level():
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--log-level", "LOUD", "farmings"])
    assert exc_info.value.code == 2


def test_log_level_is_case_insensitive(clients):
    assert cli.main(["--log-level", "debug", "farmings"]) == 0


def test_invalid_error_policy_setting(monkeypatch):
    monkeypatch.setattr(settings, "FARMING_SUBGRAPH_URL", "https://subgraph.example/farming")
    monkeypatch.setattr(settings, "GRAPH_ERROR_POLICY", "ignore")
    assert cli.main(["farmings"]) == 1
