from typer.testing import CliRunner

from pom_cli.main import app

runner = CliRunner()


def test_cli_lint_help():
    result = runner.invoke(app, ["lint", "--help"])
    assert result.exit_code == 0
    assert "Check that dependencies are sorted" in result.stdout


def test_cli_lint_unsorted(tmp_path, make_pom):
    pom = tmp_path / "pom.xml"
    pom.write_text(make_pom([("b", "y"), ("a", "x")]), encoding="utf-8")

    result = runner.invoke(app, ["lint", str(pom)])

    assert result.exit_code == 1
    assert "WARNING" in result.stdout
    assert "[unsorted-dependencies]" in result.stdout
    assert f"{pom}:4" in result.stdout


def test_cli_lint_sorted(tmp_path, make_pom):
    pom = tmp_path / "pom.xml"
    pom.write_text(make_pom([("a", "x"), ("b", "y")]), encoding="utf-8")

    result = runner.invoke(app, ["lint", str(pom)])

    assert result.exit_code == 0
    assert "Total issues found: 0" in result.stdout


def test_cli_lint_fix(tmp_path, make_pom):
    pom = tmp_path / "pom.xml"
    pom.write_text(make_pom([("b", "y"), ("a", "x")]), encoding="utf-8")

    result = runner.invoke(app, ["lint", str(pom), "--fix"])

    assert result.exit_code == 0
    assert "Sorting dependencies" in result.stdout
    assert pom.read_text(encoding="utf-8") == make_pom([("a", "x"), ("b", "y")])


def test_cli_lint_parse_error(tmp_path):
    pom = tmp_path / "pom.xml"
    pom.write_text("<project><dependencies>", encoding="utf-8")

    result = runner.invoke(app, ["lint", str(pom)])

    assert result.exit_code == 2
    assert "[parse-error]" in result.stdout


def test_cli_lint_skips_non_manifest(tmp_path, make_pom):
    other = tmp_path / "settings.xml"
    other.write_text(make_pom([("b", "y"), ("a", "x")]), encoding="utf-8")

    result = runner.invoke(app, ["lint", str(other)])

    assert result.exit_code == 0
    assert "Skipping" in result.stdout


def test_cli_lint_requires_files():
    result = runner.invoke(app, ["lint"])

    assert result.exit_code == 1
    assert "Provide files" in result.stdout


def test_cli_lint_severity_filter(tmp_path, make_pom):
    pom = tmp_path / "pom.xml"
    pom.write_text(make_pom([("b", "y"), ("a", "x")]), encoding="utf-8")

    result = runner.invoke(app, ["lint", str(pom), "--severity", "ERROR"])

    assert result.exit_code == 0
    assert "(0 reported)" in result.stdout


def test_cli_lint_config_ignore(tmp_path, make_pom):
    pom = tmp_path / "pom.xml"
    pom.write_text(make_pom([("b", "y"), ("a", "x")]), encoding="utf-8")
    config = tmp_path / ".pom-sort-lint.toml"
    config.write_text('[tool.pom-sort-lint]\nignore = ["unsorted-dependencies"]\n', encoding="utf-8")

    result = runner.invoke(app, ["lint", str(pom), "--config-file", str(config)])

    assert result.exit_code == 0


def test_cli_lint_project(tmp_path, make_pom, monkeypatch):
    (tmp_path / "core").mkdir()
    (tmp_path / "core" / "pom.xml").write_text(make_pom([("b", "y"), ("a", "x")]), encoding="utf-8")
    (tmp_path / "pom.xml").write_text(make_pom([("a", "x")]), encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["lint", "--project"])

    assert result.exit_code == 1
    assert "Scanning project" in result.stdout
    assert "Total issues found: 1" in result.stdout


def test_cli_sort_check(tmp_path, make_pom):
    pom = tmp_path / "pom.xml"
    source = make_pom([("b", "y"), ("a", "x")])
    pom.write_text(source, encoding="utf-8")

    result = runner.invoke(app, ["sort", str(pom), "--check"])

    assert result.exit_code == 1
    assert "would be reordered" in result.stdout
    assert pom.read_text(encoding="utf-8") == source


def test_cli_sort_rewrites_file(tmp_path, make_pom):
    pom = tmp_path / "pom.xml"
    pom.write_text(make_pom([("b", "y"), ("a", "x")]), encoding="utf-8")

    result = runner.invoke(app, ["sort", str(pom)])

    assert result.exit_code == 0
    assert pom.read_text(encoding="utf-8") == make_pom([("a", "x"), ("b", "y")])

    again = runner.invoke(app, ["sort", str(pom)])
    assert again.exit_code == 0
    assert "already sorted" in again.stdout


def test_cli_sort_parse_error(tmp_path):
    pom = tmp_path / "pom.xml"
    pom.write_text("<project><dependencies>", encoding="utf-8")

    result = runner.invoke(app, ["sort", str(pom)])

    assert result.exit_code == 2
    assert "ERROR" in result.stdout


def test_cli_sort_skips_non_manifest(tmp_path, make_pom):
    other = tmp_path / "settings.xml"
    source = make_pom([("org.b", "y"), ("org.a", "x")])
    other.write_text(source, encoding="utf-8")

    result = runner.invoke(app, ["sort", str(other)])

    assert result.exit_code == 0
    assert "Skipping" in result.stdout
    assert other.read_text(encoding="utf-8") == source


def test_cli_sort_honours_configured_patterns(tmp_path, make_pom):
    other = tmp_path / "deps.xml"
    other.write_text(make_pom([("org.b", "y"), ("org.a", "x")]), encoding="utf-8")
    config = tmp_path / ".pom-sort-lint.toml"
    config.write_text('[tool.pom-sort-lint]\nmanifest-patterns = ["*.xml"]\n', encoding="utf-8")

    result = runner.invoke(app, ["sort", str(other), "--config-file", str(config)])

    assert result.exit_code == 0
    assert other.read_text(encoding="utf-8") == make_pom([("org.a", "x"), ("org.b", "y")])


def test_cli_sort_missing_file(tmp_path):
    missing = tmp_path / "pom.xml"

    result = runner.invoke(app, ["sort", str(missing)])

    assert result.exit_code == 2
    assert "cannot read" in result.stdout
    assert not isinstance(result.exception, FileNotFoundError)
