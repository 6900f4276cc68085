"""Tests for category and subject commands."""

from fintrack.cli.main import cli


def invoke(cli_runner, temp_db, *args):
    return cli_runner.invoke(cli, ["--db-path", temp_db.database_path, *args])


def test_default_categories_are_seeded(cli_runner, temp_db):
    result = invoke(cli_runner, temp_db, "category", "list")

    assert result.exit_code == 0
    assert "Income:" in result.output
    assert "Expense:" in result.output
    assert "Salary" in result.output
    assert "Groceries" in result.output


def test_category_list_by_direction(cli_runner, temp_db):
    result = invoke(cli_runner, temp_db, "category", "list", "--direction", "income")

    assert "Salary" in result.output
    assert "Groceries" not in result.output


def test_create_category(cli_runner, temp_db):
    result = invoke(cli_runner, temp_db, "category", "create", "Pets", "--direction", "expense")

    assert result.exit_code == 0
    assert "Created category 'Pets'" in result.output


def test_create_duplicate_category(cli_runner, temp_db):
    result = invoke(cli_runner, temp_db, "category", "create", "salary")

    assert result.exit_code == 1
    assert "already exists" in result.output


def test_rename_category(cli_runner, temp_db):
    created = invoke(cli_runner, temp_db, "category", "create", "Pets")
    category_id = created.output.split("ID: ")[1].rstrip(")\n")

    result = invoke(cli_runner, temp_db, "category", "rename", category_id, "Animals")

    assert result.exit_code == 0
    assert "Animals" in result.output


def test_rename_onto_existing_category(cli_runner, temp_db):
    created = invoke(cli_runner, temp_db, "category", "create", "Pets")
    category_id = created.output.split("ID: ")[1].rstrip(")\n")

    result = invoke(cli_runner, temp_db, "category", "rename", category_id, "Salary")

    assert result.exit_code == 1
    assert "already exists" in result.output


def test_delete_category(cli_runner, temp_db):
    created = invoke(cli_runner, temp_db, "category", "create", "Temp")
    category_id = created.output.split("ID: ")[1].rstrip(")\n")

    result = invoke(cli_runner, temp_db, "category", "delete", category_id)

    assert result.exit_code == 0
    assert f"Deleted category {category_id}" in result.output


def test_subject_commands(cli_runner, temp_db):
    created = invoke(
        cli_runner, temp_db, "transaction", "create",
        "--sender-tax-id", "7707083893", "--sender-type", "legal", "--sender-name", "Co",
        "--sender-account", "40702810900000000001",
        "--recipient-tax-id", "500100732259",
        "--amount", "10", "--direction", "expense", "--category", "Transport",
    )
    assert created.exit_code == 0, created.output

    listed = invoke(cli_runner, temp_db, "subject", "list")
    assert "7707083893" in listed.output
    assert "500100732259" in listed.output

    updated = invoke(cli_runner, temp_db, "subject", "update", "7707083893", "--name", "New Co", "--phone", "89001112233")
    assert updated.exit_code == 0

    shown = invoke(cli_runner, temp_db, "subject", "show", "7707083893")
    assert "Name: New Co" in shown.output
    assert "Phone: 89001112233" in shown.output
    assert "40702810900000000001" in shown.output


def test_subject_update_invalid_tax_id(cli_runner, temp_db):
    invoke(
        cli_runner, temp_db, "transaction", "create",
        "--sender-tax-id", "7707083893", "--recipient-tax-id", "500100732259",
        "--amount", "10", "--direction", "expense", "--category", "Transport",
    )

    result = invoke(cli_runner, temp_db, "subject", "update", "7707083893", "--new-tax-id", "42")

    assert result.exit_code == 1
    assert "10 or 12 digits" in result.output


def test_subject_show_missing(cli_runner, temp_db):
    result = invoke(cli_runner, temp_db, "subject", "show", "0000000000")

    assert result.exit_code == 1
    assert "not found" in result.output


def test_subject_update_invalid_phone_keeps_transactions_editable(cli_runner, temp_db):
    invoke(
        cli_runner, temp_db, "transaction", "create",
        "--sender-tax-id", "7707083893", "--recipient-tax-id", "500100732259",
        "--amount", "10", "--direction", "expense", "--category", "Transport",
    )

    result = invoke(cli_runner, temp_db, "subject", "update", "7707083893", "--phone", "555-1234")

    assert result.exit_code == 1
    assert "Invalid phone" in result.output

    result = invoke(cli_runner, temp_db, "transaction", "update", "1", "--amount", "20")
    assert result.exit_code == 0, result.output
