from imdb_lists.utils import export_endpoint, normalize_column, slugify, split_ids

def test_split_ids_basic():
    assert split_ids("ls1, ls2 ,,ls3") == ["ls1", "ls2", "ls3"]
    assert split_ids("") == []
    assert split_ids(None) == []

def test_slugify():
    assert slugify("Watched (2023)") == "watched-2023"
    assert slugify("WATCHLIST") == "watchlist"
    assert slugify("  Best   of -- 90s!! ") == "best-of-90s"
    assert slugify("2001: A Space Odyssey") == "2001-a-space-odyssey"
    assert slugify("Amélie & Friends") == "amelie-friends"
    assert slugify("映画") == ""

def test_normalize_column():
    assert normalize_column("Title Type") == "title_type"
    assert normalize_column("Runtime (mins)") == "runtime_mins"
    assert normalize_column("IMDb Rating") == "imdb_rating"
    assert normalize_column(" Const ") == "const"

def test_export_endpoint():
    assert export_endpoint("ls123456") == "/list/ls123456/export"
