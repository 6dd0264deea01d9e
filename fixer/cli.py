"""Fixer CLI: screen job postings and inspect moderation rules."""

import json

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fixer import __version__

console = Console()


@click.group()
@click.version_option(version=__version__)
def main():
    """Fixer job posting screening.

    Check job titles, descriptions and payment amounts against the
    marketplace's moderation rules before they are published.
    """


def _load_rules_or_exit(rules_path: str | None):
    from fixer.config import get_active_rules
    from fixer.errors import RuleConfigError
    from fixer.moderation.rules import load_rules

    try:
        return load_rules(rules_path) if rules_path else get_active_rules()
    except RuleConfigError as e:
        console.print(f"[red]Could not load rules:[/] {escape(str(e))}")
        raise SystemExit(1)


def _print_result(label: str, result) -> None:
    if result.is_approved:
        console.print(f"  [green]APPROVED[/] {label}")
        return
    detail = f"{result.rule}:{result.category}" if result.category else result.rule
    console.print(f"  [red]REJECTED[/] {label} ({detail})")
    console.print(f"    {result.reason}")


# ── Check ────────────────────────────────────────────────────────────


@main.command(name="check-job")
@click.argument("title")
@click.argument("description")
@click.option("--rules", "rules_path", default=None, help="YAML rules file (default: built-in)")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def check_job(title: str, description: str, rules_path: str | None, as_json: bool):
    """Run the content filter on a job TITLE and DESCRIPTION."""
    from fixer.moderation.content_filter import filter_job_content

    rules = _load_rules_or_exit(rules_path)
    result = filter_job_content(title, description, rules)

    if as_json:
        click.echo(json.dumps(result.to_dict()))
    else:
        _print_result("job content", result)

    if not result.is_approved:
        raise SystemExit(1)


@main.command(name="check-amount")
@click.argument("amount", type=float)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def check_amount(amount: float, as_json: bool):
    """Validate a proposed payment AMOUNT."""
    from fixer.moderation.payment import validate_payment_amount
    from fixer.utils.geo import format_price

    result = validate_payment_amount(amount)

    if as_json:
        click.echo(json.dumps(result.to_dict()))
    else:
        _print_result(f"payment of {format_price(amount)}", result)

    if not result.is_approved:
        raise SystemExit(1)


@main.command()
@click.option("--title", required=True, help="Job title")
@click.option("--description", required=True, help="Job description")
@click.option("--amount", required=True, type=float, help="Payment amount in dollars")
@click.option("--payment-type", default="fixed", type=click.Choice(["fixed", "hourly"]))
@click.option("--rules", "rules_path", default=None, help="YAML rules file (default: built-in)")
def screen(title: str, description: str, amount: float, payment_type: str, rules_path: str | None):
    """Screen a full job posting: content first, then payment amount."""
    from fixer.payments.fees import calculate_job_totals
    from fixer.screening import screen_job_posting
    from fixer.utils.geo import format_price

    rules = _load_rules_or_exit(rules_path)
    console.print(f"\n[bold blue]Fixer[/] — Screening: {escape(title)}\n")

    result = screen_job_posting(title, description, amount, rules)
    _print_result("content", result.content)
    if result.payment is not None:
        _print_result("payment amount", result.payment)

    if not result.is_approved:
        console.print(f"\n[red]Posting rejected at {result.stage} stage.[/]")
        raise SystemExit(1)

    totals = calculate_job_totals(amount, payment_type)
    console.print(
        f"\n[green]Posting approved.[/] Service fee {format_price(totals.service_fee)}, "
        f"total {format_price(totals.total_amount)}"
    )


# ── Rules ────────────────────────────────────────────────────────────


@main.group()
def rules():
    """Inspect and validate moderation rule sets."""


@rules.command(name="show")
@click.option("--rules", "rules_path", default=None, help="YAML rules file (default: built-in)")
def show_rules(rules_path: str | None):
    """Show the categories, keywords and thresholds of a rule set."""
    rule_set = _load_rules_or_exit(rules_path)

    table = Table(title=escape(f"Rule set '{rule_set.name}' v{rule_set.version}"))
    table.add_column("Order", style="dim", width=5)
    table.add_column("Category", style="cyan")
    table.add_column("Patterns", justify="right")

    for i, category in enumerate(rule_set.categories):
        table.add_row(str(i + 1), category.name, str(len(category.patterns)))

    console.print(table)
    console.print(f"\n[bold]Suspicious keywords ({len(rule_set.suspicious_keywords)}):[/]")
    console.print("  " + escape(", ".join(rule_set.suspicious_keywords)))

    console.print("\n[bold]Thresholds:[/]")
    t = rule_set.thresholds
    console.print(f"  min_description_length = {t.min_description_length}")
    console.print(f"  max_caps_percentage = {t.max_caps_percentage}")
    console.print(f"  min_hourly_rate = {t.min_hourly_rate}")
    console.print(f"  max_reasonable_amount = {t.max_reasonable_amount}")
    console.print(f"  repetition_min_tokens = {t.repetition_min_tokens}")
    console.print(f"  repetition_min_unique_ratio = {t.repetition_min_unique_ratio}")


@rules.command(name="validate")
@click.argument("rules_path")
def validate_rules(rules_path: str):
    """Validate a YAML rules file."""
    from fixer.moderation.rules import validate_rules_file

    console.print(f"\n[bold blue]Fixer[/] — Validating: {escape(rules_path)}\n")

    issues = validate_rules_file(rules_path)
    if issues:
        console.print("[red]Rules validation FAILED:[/]")
        for issue in issues:
            console.print(f"  [red]x[/] {escape(issue)}")
        raise SystemExit(1)

    console.print("  [green]v[/] Rules file is valid")


# ── Distance ─────────────────────────────────────────────────────────


@main.command()
@click.argument("lat1", type=float)
@click.argument("lon1", type=float)
@click.argument("lat2", type=float)
@click.argument("lon2", type=float)
def distance(lat1: float, lon1: float, lat2: float, lon2: float):
    """Distance between a job at LAT1 LON1 and a worker at LAT2 LON2."""
    from fixer.utils.geo import calculate_distance, format_distance

    console.print(format_distance(calculate_distance(lat1, lon1, lat2, lon2)))


if __name__ == "__main__":
    main()
