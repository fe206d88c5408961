import logging
from pathlib import Path

import typer
from pom_linter.autofix import AutoFixEngine
from pom_linter.engine import LinterEngine
from pom_linter.exceptions import ParseError
from pom_linter.manifest import find_manifests, is_manifest_file, read_manifest, write_manifest

from .config import LintConfig
from .converters import internal_issue_to_lint_issue, parse_error_to_lint_issue
from .models import LintIssue

app = typer.Typer(help="Maven dependency order linter - check and sort <dependencies> in pom.xml files")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def lint(
    files: list[Path] = typer.Argument(None, help="Manifest files to lint"),
    project: bool = typer.Option(False, help="Lint every manifest under the current directory"),
    config_file: Path = typer.Option(Path(".pom-sort-lint.toml"), help="Path to config file"),
    severity: str = typer.Option("STYLE", help="Minimum severity to show"),
    fix: bool = typer.Option(False, help="Sort unsorted dependencies in place"),
):
    """Check that dependencies are sorted by groupId, then artifactId"""
    config = LintConfig(config_file)
    engine = LinterEngine(manifest_patterns=config.manifest_patterns)
    enabled_rules = config.apply_to_registry(engine.registry)
    autofix = AutoFixEngine()

    if project:
        root = Path.cwd()
        typer.echo(f"Scanning project at {root}...")
        files = find_manifests(root, config.manifest_patterns)

    if not files:
        typer.echo("Error: Provide files or use --project")
        raise typer.Exit(code=1)

    all_issues: list[LintIssue] = []
    failed_files = 0

    for file_path in files:
        if not engine.is_manifest(file_path):
            typer.echo(f"Skipping {file_path}: not a Maven manifest")
            continue

        try:
            current_issues = engine.analyze_file(file_path, rules=enabled_rules)

            fixable = [i for i in current_issues if i.auto_fixable and autofix.can_fix(i.rule_id)]
            if fix and fixable:
                typer.echo(f"  🔧 Sorting dependencies in {file_path.name}...")
                write_manifest(file_path, autofix.apply_fixes(file_path, fixable))
                current_issues = engine.analyze_file(file_path, rules=enabled_rules)
        except ParseError as e:
            failed_files += 1
            all_issues.append(parse_error_to_lint_issue(file_path, e))
            continue
        except OSError as e:
            failed_files += 1
            typer.echo(f"Error: cannot read {file_path}: {e}")
            continue

        all_issues.extend(internal_issue_to_lint_issue(i) for i in current_issues)

    severity_rank = {"ERROR": 3, "WARNING": 2, "STYLE": 1, "INFO": 0}
    min_rank = severity_rank.get(severity.upper(), 1)

    reported_count = 0
    for issue in sorted(all_issues, key=lambda x: (x.file_path, x.line_number)):
        if severity_rank.get(issue.severity.value, 0) >= min_rank:
            typer.echo(
                f"{issue.severity.value}: {issue.file_path}:{issue.line_number} [{issue.rule_id}] - {issue.message}"
            )
            reported_count += 1

    typer.echo(f"\nTotal issues found: {len(all_issues)} ({reported_count} reported)")

    if failed_files:
        raise typer.Exit(code=2)
    if reported_count:
        raise typer.Exit(code=1)


@app.command()
def sort(
    file: Path = typer.Argument(..., help="Manifest file to sort"),
    check: bool = typer.Option(False, help="Only report whether the file would change"),
    config_file: Path = typer.Option(Path(".pom-sort-lint.toml"), help="Path to config file"),
):
    """Sort the dependencies of a manifest in place"""
    config = LintConfig(config_file)
    if not is_manifest_file(file, config.manifest_patterns):
        typer.echo(f"Skipping {file}: not a Maven manifest")
        return

    try:
        result = AutoFixEngine().fix_string(read_manifest(file))
    except ParseError as e:
        typer.echo(f"ERROR: {file}: {e}")
        raise typer.Exit(code=2)
    except OSError as e:
        typer.echo(f"Error: cannot read {file}: {e}")
        raise typer.Exit(code=2)

    if not result.modified:
        typer.echo(f"{file}: dependencies already sorted")
        return

    if check:
        typer.echo(f"{file}: dependencies would be reordered ({result.replacements} entries)")
        raise typer.Exit(code=1)

    write_manifest(file, result.source)
    typer.echo(f"{file}: sorted dependencies ({result.replacements} entries moved)")


if __name__ == "__main__":
    app()
