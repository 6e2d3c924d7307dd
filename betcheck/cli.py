import argparse
import json
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from betcheck.analyzers.domain_analyzer import (
    advanced_phishing_check,
    check_bet_site,
    quick_phishing_check,
)
from betcheck.registry.loader import RegistryCache, load_registry
from betcheck.registry.tax_id import format_tax_id
from betcheck.phishing.scorer import MAX_SCORE
from betcheck.types import RiskLevel, ScoreMode

console = Console()

RISK_STYLE = {
    RiskLevel.LOW: "green",
    RiskLevel.MEDIUM: "yellow",
    RiskLevel.HIGH: "bold red",
}


def display_verdict(target, verdict) -> None:
    if verdict.is_approved:
        console.print(Panel(f"[bold green]APPROVED:[/bold green] {target}", expand=False))
        console.print(f"[bold]Company:[/bold] {verdict.company_name}")
        console.print(f"[bold]Tax ID:[/bold] {format_tax_id(verdict.tax_id) or verdict.tax_id}")
        console.print(f"[bold]Registered domain:[/bold] {verdict.domain}")
        console.print(f"[dim]Matched by: {verdict.matched_by}[/dim]\n")

        if verdict.related_sites:
            table = Table(title="Related Sites", show_lines=True)
            table.add_column("Domain", style="cyan", no_wrap=True)
            table.add_column("Brand", style="magenta")
            for site in verdict.related_sites:
                table.add_row(site.domain, site.brand)
            console.print(table)
        return

    console.print(Panel(f"[bold red]NOT APPROVED:[/bold red] {target}", expand=False))

    warning = verdict.phishing_warning
    if warning is None:
        return

    console.print(f"[bold red]Possible phishing:[/bold red] {warning.reason.value}")
    if warning.message:
        console.print(f"[red]{warning.message}[/red]")

    if warning.similar_sites:
        table = Table(title="Similar Approved Sites", show_lines=True)
        table.add_column("Domain", style="cyan", no_wrap=True)
        table.add_column("Company", style="magenta")
        table.add_column("Tax ID", style="green")
        for site in warning.similar_sites:
            table.add_row(site.domain, site.company_name, format_tax_id(site.tax_id) or site.tax_id)
        console.print(table)


def display_assessment(assessment, explain: bool = False) -> None:
    style = RISK_STYLE[assessment.risk_level]
    console.print(
        f"\n[bold]Phishing score:[/bold] {assessment.score:g}/{MAX_SCORE} "
        f"([{style}]{assessment.risk_level.value}[/{style}], {assessment.mode.value})"
    )
    for detail in assessment.details:
        console.print(f"  - {detail}")

    if assessment.suspicious_terms:
        console.print(f"[dim]Suspicious URL terms: {', '.join(assessment.suspicious_terms)}[/dim]")

    if not explain:
        return

    table = Table(title="Signal Scores", show_lines=True)
    table.add_column("Signal", style="cyan", no_wrap=True)
    table.add_column("Score", justify="right", style="green")
    for name, score in assessment.signal_scores.items():
        table.add_row(name, f"{score:g}")
    console.print(table)

    if assessment.similar_domains:
        table = Table(title="Similar Registry Domains", show_lines=True)
        table.add_column("Domain", style="cyan", no_wrap=True)
        table.add_column("Distance", justify="right", style="green")
        for similar in assessment.similar_domains:
            table.add_row(similar.domain, str(similar.distance))
        console.print(table)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Check a site against the approved .bet.br operator registry",
    )
    parser.add_argument(
        "target",
        help="Domain or URL to check",
    )
    parser.add_argument(
        "-r",
        "--registry",
        help="Registry CSV path or URL (default: $REGISTRY_SOURCE)",
    )
    parser.add_argument(
        "-m",
        "--mode",
        choices=[m.value for m in ScoreMode],
        default=ScoreMode.COMBINED.value,
        help="Phishing scorer mode for unapproved domains (default: combined)",
    )
    parser.add_argument(
        "--probe-redirects",
        action="store_true",
        help="Probe the site for redirects (combined mode only)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output raw JSON instead of pretty tables",
    )
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Show per-signal scores and similar registry domains",
    )

    args = parser.parse_args(argv)
    registry = RegistryCache(loader=lambda: load_registry(args.registry)).get()

    verdict = check_bet_site(args.target, registry)

    assessment = None
    if not verdict.is_approved:
        if args.mode == ScoreMode.SIMPLIFIED.value:
            assessment = quick_phishing_check(args.target)
        else:
            assessment = advanced_phishing_check(
                args.target, registry, probe_redirects=args.probe_redirects,
            )

    # Output modes
    if args.json:
        output = verdict.to_dict()
        if assessment is not None:
            output["phishing_analysis"] = assessment.to_dict()
        console.print_json(json.dumps(output, ensure_ascii=False))
        return

    display_verdict(args.target, verdict)
    if assessment is not None:
        display_assessment(assessment, explain=args.explain)


if __name__ == "__main__":
    main()
