from frontline.services import opener


def test_resolve_item_finds_extension(tmp_path):
    (tmp_path / "comic").mkdir()
    (tmp_path / "comic" / "012.jpg").write_bytes(b"x")
    (tmp_path / "comic" / "0123.png").write_bytes(b"x")

    assert opener.resolve_item(tmp_path, "comic/012") == tmp_path / "comic" / "012.jpg"


def test_resolve_item_ignores_partial_downloads(tmp_path):
    (tmp_path / "comic").mkdir()
    (tmp_path / "comic" / "012.jpg.part").write_bytes(b"x")

    assert opener.resolve_item(tmp_path, "comic/012") is None


def test_open_items_counts_failures(monkeypatch, tmp_path):
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "001.png").write_bytes(b"x")
    opened = []
    monkeypatch.setattr(opener, "open_file", lambda path, program=None: opened.append((path, program)) or True)

    failures = opener.open_items(tmp_path, ["a/001", "b/001"], program="viewer")

    assert failures == 1
    assert opened == [(tmp_path / "a" / "001.png", "viewer")]


def test_open_file_reports_missing_program(tmp_path):
    path = tmp_path / "x.png"
    path.write_bytes(b"x")
    assert opener.open_file(path, program=str(tmp_path / "no-such-viewer")) is False
