"""Tests for the click command-line front end."""

import pytest
from click.testing import CliRunner

from bookstore.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()

    def _run(*args):
        return runner.invoke(cli, ["--data-dir", str(tmp_path), "book", *args])

    return _run


def _add_dune(run, quantity="5"):
    return run(
        "add", "--isbn", "ISBN001", "--title", "Dune", "--author", "Frank Herbert",
        "--genre", "science_fiction", "--price", "15.00", "--quantity", quantity,
    )


class TestBookCommands:

    def test_add_then_show(self, run):
        result = _add_dune(run)
        assert result.exit_code == 0, result.output
        assert "now has 5 in stock" in result.output

        result = run("show", "--isbn", "ISBN001")
        assert result.exit_code == 0
        assert "Dune" in result.output
        assert "$15.00" in result.output
        assert "SCIENCE_FICTION" in result.output

    def test_add_merges_quantity(self, run):
        _add_dune(run, "5")
        result = _add_dune(run, "3")
        assert "now has 8 in stock" in result.output

    def test_remove_partial_and_full(self, run):
        _add_dune(run, "5")

        result = run("remove", "--isbn", "ISBN001", "--quantity", "2")
        assert result.exit_code == 0
        assert "3 remaining" in result.output

        result = run("remove", "--isbn", "ISBN001", "--quantity", "3")
        assert result.exit_code == 0
        assert "fully removed" in result.output

        result = run("show", "--isbn", "ISBN001")
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_remove_too_many_reports_error(self, run):
        _add_dune(run, "2")
        result = run("remove", "--isbn", "ISBN001", "--quantity", "3")
        assert result.exit_code == 1
        assert "Not enough stock available" in result.output

    def test_update(self, run):
        _add_dune(run)
        result = run(
            "update", "--isbn", "ISBN001", "--title", "Dune Messiah",
            "--author", "Frank Herbert", "--genre", "FICTION", "--price", "9.99",
        )
        assert result.exit_code == 0, result.output
        assert "Dune Messiah" in result.output
        assert "Quantity: 5" in result.output

    def test_find_by_genre(self, run):
        _add_dune(run)
        result = run("find", "--by", "GENRE", "--value", "science_fiction")
        assert result.exit_code == 0
        assert "ISBN001" in result.output
        assert "Page 1 of 1" in result.output

    def test_find_invalid_filter_type(self, run):
        result = run("find", "--by", "publisher", "--value", "x")
        assert result.exit_code == 1
        assert "Invalid filter type: publisher" in result.output

    def test_price_range(self, run):
        _add_dune(run)
        result = run("price", "--min", "10", "--max", "20")
        assert result.exit_code == 0
        assert "ISBN001" in result.output

    def test_price_range_min_above_max(self, run):
        result = run("price", "--min", "30", "--max", "10")
        assert result.exit_code == 1
        assert "minPrice cannot be greater than maxPrice" in result.output

    def test_empty_listing(self, run):
        result = run("find", "--by", "author", "--value", "Nobody")
        assert result.exit_code == 0
        assert "No books found." in result.output

    def test_invalid_price_on_add(self, run):
        result = run(
            "add", "--isbn", "X", "--title", "T", "--author", "A",
            "--genre", "POETRY", "--price=-1", "--quantity", "1",
        )
        assert result.exit_code == 1
        assert "Price cannot be null or negative." in result.output


class TestDataDirConfig:

    def test_data_dir_from_environment(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["book", "add", "--isbn", "E1", "--title", "T", "--author", "A",
             "--genre", "POETRY", "--price", "1", "--quantity", "1"],
            env={"BOOKSTORE_DATA_DIR": str(tmp_path)},
        )
        assert result.exit_code == 0, result.output
        assert (tmp_path / "books.json").exists()
