import json
from pathlib import Path

import httpx
import pytest
from http_client import HttpClient
from imdb_lists import cli

LIST_CSV = (Path(__file__).parent / "testdata" / "imdb_list.csv").read_bytes()

def fake_imdb(request: httpx.Request) -> httpx.Response:
    names = {"wl1": "WATCHLIST", "ls1": "Watched (2023)"}
    list_id = request.url.path.split("/")[2]
    if list_id == "boom":
        return httpx.Response(500)
    if list_id not in names:
        return httpx.Response(404)
    headers = {"Content-Disposition": f'attachment; filename="{names[list_id]}.csv"'}
    return httpx.Response(200, headers=headers, content=LIST_CSV)

@pytest.fixture
def fake_http(monkeypatch):
    def build(connect_timeout, read_timeout):
        return HttpClient(connect_timeout, read_timeout, client=httpx.Client(transport=httpx.MockTransport(fake_imdb)))
    monkeypatch.setattr(cli, "HttpClient", build)

def test_main_dumps_lists_and_skips_missing(fake_http, capsys):
    cli.main(["--base-url", "http://imdb.test", "--watchlist-id", "wl1", "--list-ids", "ls1,gone", "--json"])

    out = json.loads(capsys.readouterr().out)
    assert [entry["trakt_list_slug"] for entry in out] == ["watchlist", "watched-2023"]
    assert out[0]["is_watchlist"] is True
    assert len(out[1]["list_items"]) == 3

def test_main_exits_on_unexpected_status(fake_http, capsys):
    with pytest.raises(SystemExit) as ei:
        cli.main(["--base-url", "http://imdb.test", "--list-ids", "boom"])
    assert ei.value.code == 2
    assert "unexpected status code: 500" in capsys.readouterr().err

def test_main_skips_missing_watchlist_like_any_list(fake_http, capsys):
    cli.main(["--base-url", "http://imdb.test", "--watchlist-id", "gone", "--list-ids", "ls1", "--json"])

    captured = capsys.readouterr()
    out = json.loads(captured.out)
    assert [entry["list_id"] for entry in out] == ["ls1"]
    assert "[skip] list gone could not be found" in captured.err
