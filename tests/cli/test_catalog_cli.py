from __future__ import annotations

import json

from texassist.cli import catalog as cli_catalog


def test_cli_catalog_groups(capsys) -> None:
    assert cli_catalog.main(["--groups"]) == 0

    groups = json.loads(capsys.readouterr().out)
    assert groups[0] == "basic-operators"
    assert "subsubp" in groups


def test_cli_catalog_filter_by_category(capsys) -> None:
    assert cli_catalog.main(["--category", "question"]) == 0

    entries = json.loads(capsys.readouterr().out)
    assert [entry["text"] for entry in entries] == [r"\choice", r"\fill", r"\subp", r"\subsubp"]
    assert all(entry["category"] == "question" for entry in entries)


def test_cli_catalog_bad_settings(tmp_path, capsys) -> None:
    missing = tmp_path / "missing.json"

    assert cli_catalog.main(["--settings", str(missing)]) == 1
    assert capsys.readouterr().out.startswith("ERROR:")
