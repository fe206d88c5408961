from pom_cli.config import LintConfig
from pom_linter.registry import RuleRegistry


def test_defaults_without_file(tmp_path):
    config = LintConfig(tmp_path / "missing.toml")

    assert config.select == ["unsorted"]
    assert config.ignore == []
    assert config.manifest_patterns == ["pom.xml", "*.pom"]


def test_loads_tool_table(tmp_path):
    path = tmp_path / ".pom-sort-lint.toml"
    path.write_text(
        '[tool.pom-sort-lint]\nignore = ["unsorted-dependencies"]\nmanifest-patterns = ["*.xml"]\n',
        encoding="utf-8",
    )

    config = LintConfig(path)

    assert config.ignore == ["unsorted-dependencies"]
    assert config.manifest_patterns == ["*.xml"]
    assert config.apply_to_registry(RuleRegistry()) == []


def test_invalid_toml_falls_back_to_defaults(tmp_path, caplog):
    path = tmp_path / ".pom-sort-lint.toml"
    path.write_text("[tool.pom-sort-lint\nselect = ", encoding="utf-8")

    config = LintConfig(path)

    assert config.select == ["unsorted"]
    assert "using defaults" in caplog.text
