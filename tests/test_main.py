from bintree.main import run_smoke_test


def test_smoke_test_output(capsys):
    run_smoke_test()
    out = capsys.readouterr().out

    assert "--- bintree smoke test ---" in out
    assert "Inserted 5 nodes" in out
    assert "GET 4 -> doot" in out
    assert "REMOVE 7 -> cherry" in out
    assert "GET 7 after remove -> None" in out
    assert "REMOVE 2 (root) -> goodbye" in out
    assert "  - 9: uber" in out
    assert "Cleared; empty=True" in out
