"""Tests for statistics commands."""

from fintrack.cli.main import cli


def invoke(cli_runner, temp_db, *args):
    return cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "--user", "alice", *args])


def add(cli_runner, temp_db, amount, direction, category):
    result = invoke(
        cli_runner, temp_db, "transaction", "create",
        "--sender-tax-id", "7707083893", "--recipient-tax-id", "500100732259",
        "--amount", amount, "--direction", direction, "--category", category,
    )
    assert result.exit_code == 0, result.output
    return result.output.split("Created transaction ")[1].split(" ")[0]


def test_summary(cli_runner, temp_db):
    add(cli_runner, temp_db, "1000", "income", "Salary")
    add(cli_runner, temp_db, "250.50", "expense", "Groceries")
    deleted = add(cli_runner, temp_db, "99", "expense", "Groceries")
    invoke(cli_runner, temp_db, "transaction", "delete", deleted, "--yes")

    result = invoke(cli_runner, temp_db, "stats", "summary")

    assert result.exit_code == 0
    assert "Transactions: 2" in result.output
    assert "1,000.00" in result.output
    assert "250.50" in result.output
    assert "749.50" in result.output


def test_by_category(cli_runner, temp_db):
    add(cli_runner, temp_db, "1000", "income", "Salary")
    add(cli_runner, temp_db, "20", "expense", "Groceries")
    add(cli_runner, temp_db, "30", "expense", "Groceries")

    result = invoke(cli_runner, temp_db, "stats", "by-category")

    assert result.exit_code == 0
    groceries_line = next(line for line in result.output.splitlines() if line.startswith("Groceries"))
    assert "Expense" in groceries_line
    assert "50.00" in groceries_line


def test_by_period(cli_runner, temp_db):
    add(cli_runner, temp_db, "1000", "income", "Salary")

    result = invoke(cli_runner, temp_db, "stats", "by-period")

    assert result.exit_code == 0
    assert "1,000.00" in result.output


def test_empty_statistics(cli_runner, temp_db):
    result = invoke(cli_runner, temp_db, "stats", "by-category")

    assert result.exit_code == 0
    assert "No transactions found." in result.output


def test_by_period_rejects_two_periods(cli_runner, temp_db):
    result = invoke(cli_runner, temp_db, "stats", "by-period", "--this-month", "--last-month")

    assert result.exit_code == 1
    assert "Only one period option" in result.output
