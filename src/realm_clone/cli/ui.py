"""Rich UI components for panels and formatting."""

from pathlib import Path

from rich.markup import escape
from rich.panel import Panel

from realm_clone.core.cloner import CloneResult

from .console import console, err_console

NEXT_STEPS = [
    "Import the new realm JSON file into Keycloak",
    "Update client secrets for any confidential clients",
    "Review and update SMTP settings if needed",
    "Test the new realm functionality",
]


def render_summary_panel(
    result: CloneResult,
    input_path: Path,
    output_path: Path,
    dry_run: bool = False,
) -> None:
    """Render the clone summary panel."""
    context = result.context
    lines = [
        f"Input: {escape(str(input_path))}",
        f"Output: {escape(str(output_path))}" + (" [dim](dry run, not written)[/dim]" if dry_run else ""),
        f"Realm: {escape(context.old_name)} → {escape(context.new_name)}",
        "",
        f"  • Identifiers replaced: {result.replaced_count}",
        f"  • Container references fixed: {result.containers_fixed}",
        f"  • Secrets removed: {result.secrets_removed}",
    ]
    if context.old_id is None:
        lines.append("")
        lines.append("[yellow]⚠[/yellow] Document had no realm id; none was assigned")

    panel = Panel(
        "\n".join(lines),
        title="Summary",
        border_style="yellow" if dry_run else "green",
    )
    console.print(panel)


def render_next_steps() -> None:
    """Print the follow-up checklist for importing the clone."""
    console.print("\n[bold]Next steps:[/bold]")
    for number, step in enumerate(NEXT_STEPS, start=1):
        console.print(f"{number}. {step}")


def render_error_panel(title: str, message: str, details: list[str] | None = None) -> None:
    """Render error panel."""
    lines = [escape(message)]

    if details:
        lines.append("")
        for detail in details:
            lines.append(f"  • {escape(detail)}")

    panel = Panel("\n".join(lines), title=title, border_style="red")
    err_console.print(panel)
