from click.testing import CliRunner
from bstree.cli import cli


def test_cli_show_all_orders():
    runner = CliRunner()
    result = runner.invoke(cli, ["show", "5", "3", "8"])
    assert result.exit_code == 0
    assert "3  5  8  " in result.output
    assert "5  3  8  " in result.output
    assert "3  8  5  " in result.output
    # graph is printed by default
    assert "        8\n" in result.output
    assert " 5\n" in result.output


def test_cli_show_remove():
    runner = CliRunner()
    args = ["show", "5", "3", "8", "1", "4", "7", "9", "--remove=3", "--remove=8"]
    result = runner.invoke(cli, args + ["--order=inorder", "--no-graph"])
    assert result.exit_code == 0
    assert "1  4  5  7  9  " in result.output
    assert "_" not in result.output


def test_cli_show_separator():
    runner = CliRunner()
    result = runner.invoke(
        cli, ["show", "2", "1", "3", "--order=preorder", "--separator=,"]
    )
    assert result.exit_code == 0
    assert "2,1,3," in result.output


def test_cli_show_strings():
    runner = CliRunner()
    result = runner.invoke(
        cli, ["show", "pear", "apple", "--strings", "--order=inorder"]
    )
    assert result.exit_code == 0
    assert "apple  pear  " in result.output


def test_cli_show_duplicate():
    runner = CliRunner()
    result = runner.invoke(cli, ["show", "5", "3", "5"])
    assert result.exit_code == 1
    assert "Item already in the tree" in result.output


def test_cli_show_missing_removal():
    runner = CliRunner()
    result = runner.invoke(cli, ["show", "5", "3", "--remove=4"])
    assert result.exit_code == 1
    assert "Item not in the BST" in result.output


def test_cli_show_invalid_number():
    runner = CliRunner()
    result = runner.invoke(cli, ["show", "5", "three"])
    assert result.exit_code == 1


def test_cli_show_requires_values():
    runner = CliRunner()
    result = runner.invoke(cli, ["show"])
    assert result.exit_code != 0
