"""Tests for the command-line interface."""
import json

import pytest

import explorer


def run(catalog_file, *args):
    explorer.main(["--file", str(catalog_file), *args])


def test_list_json(catalog_file, capsys):
    """Test listing books as JSON."""
    run(catalog_file, "list", "--format", "json")
    
    data = json.loads(capsys.readouterr().out)
    assert [b["isbn"] for b in data] == ["111", "222"]
    assert data[0]["price"] == "9.99"


def test_list_table(catalog_file, capsys):
    """Test the default table output."""
    run(catalog_file, "list")
    
    out = capsys.readouterr().out
    assert "Learning XML" in out
    assert "Erik T. Ray, Jane Doe" in out


def test_add_update_delete(catalog_file, capsys):
    """Test mutating commands."""
    run(catalog_file, "add", "--isbn", "333", "--title", "New", "--author", "N", "--author", "M",
        "--category", "misc", "--year", "2020", "--price", "4.25")
    run(catalog_file, "update", "333", "--price", "5")
    capsys.readouterr()
    
    run(catalog_file, "show", "333", "--format", "json")
    data = json.loads(capsys.readouterr().out)
    assert data == [{
        "isbn": "333",
        "title": "New",
        "authors": ["N", "M"],
        "category": "misc",
        "year": 2020,
        "price": "5"
    }]
    
    run(catalog_file, "delete", "333")
    capsys.readouterr()
    run(catalog_file, "list", "--format", "compact")
    assert "333" not in capsys.readouterr().out


def test_report_to_file(catalog_file, tmp_path):
    """Test writing the HTML report."""
    output = tmp_path / "report.html"
    
    run(catalog_file, "report", "--format", "html", "--output", str(output))
    
    assert output.read_text(encoding="utf-8").startswith("<table")


def test_catalog_error_exits(catalog_file):
    """Test that catalog failures exit with status 1."""
    with pytest.raises(SystemExit) as exc:
        run(catalog_file, "delete", "999")
    
    assert exc.value.code == 1


def test_no_command(catalog_file):
    """Test that running without a command prints help and fails."""
    with pytest.raises(SystemExit) as exc:
        run(catalog_file)
    
    assert exc.value.code == 1


@pytest.mark.parametrize("price", ["Infinity", "NaN", "abc"])
def test_add_rejects_bad_price(catalog_file, price):
    """Test that the CLI refuses prices that are not finite numbers."""
    before = catalog_file.read_bytes()
    
    with pytest.raises(SystemExit) as exc:
        run(catalog_file, "add", "--isbn", "333", "--title", "New", "--author", "N",
            "--category", "misc", "--year", "2020", "--price", price)
    
    assert exc.value.code == 2
    assert catalog_file.read_bytes() == before
