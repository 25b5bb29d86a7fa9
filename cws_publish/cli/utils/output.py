# cws_publish/cli/utils/output.py
"""Output formatting utilities"""

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

from ...models import UploadResult, ResolveResult, ItemResource
from ...utils.file_utils import format_size

console = Console()


def print_error(message: str, title: str = "Error") -> None:
    """Display an error in a red panel"""
    panel = Panel(
        f"[red]{escape(message)}[/red]",
        title=f"[bold red]{title}[/bold red]",
        border_style="red"
    )
    console.print(panel)


def _item_lines(label: str, item: ItemResource) -> list:
    lines = [
        f"[bold]{label}:[/bold] {escape(item.upload_state or 'N/A')}",
    ]
    for error in item.item_errors:
        lines.append(f"  [yellow]• \\[{escape(error.code)}] {escape(error.detail)}[/yellow]")
    return lines


def format_upload_result(result: UploadResult) -> None:
    """Format and display upload operation result"""
    lines = [
        f"[green]✓[/green] Upload completed successfully!",
        f"",
        f"[bold]Extension:[/bold] {escape(result.extension_id)}",
        f"[bold]Archive:[/bold] {escape(str(result.zip_path))}",
        f"[bold]Type:[/bold] {escape(result.content_type)}",
    ]
    lines.extend(_item_lines("Upload state", result.upload))

    if result.publish:
        lines.append(f"[bold]Publish target:[/bold] {escape(str(result.publish_target))}")
        lines.extend(_item_lines("Publish state", result.publish))

    lines.append(f"[bold]Duration:[/bold] {result.duration:.2f}s")

    panel = Panel(
        "\n".join(lines),
        title="Upload Result",
        border_style="green"
    )
    console.print(panel)


def format_resolve_result(result: ResolveResult) -> None:
    """Format and display store config resolution result"""
    if result.copied:
        table = Table(title="Copied Providers")
        table.add_column("Provider", style="cyan")
        table.add_column("Source")
        table.add_column("Destination", style="green")
        table.add_column("Size", justify="right")

        for copied in result.copied:
            table.add_row(
                escape(copied.provider_name),
                escape(str(copied.source)),
                escape(str(copied.destination)),
                format_size(copied.size)
            )
        console.print(table)

    if result.skipped:
        console.print(f"\n[dim]Skipped {len(result.skipped)} store config(s):[/dim]")
        for skipped in result.skipped:
            console.print(f"[dim]  • {escape(str(skipped.manifest_path))}: {skipped.reason.value}[/dim]")

    console.print(
        f"\n[green]✓[/green] Processed {len(result.manifests)} store config(s), "
        f"copied {len(result.copied)} provider(s)"
    )
