"""User-facing error messages with remediation."""

from __future__ import annotations

from ccgraph.errors.types import ErrorCategory

USAGE_HINT = "ccusage daily --json | ccusage-graph"

REMEDIATION_TEMPLATES: dict[ErrorCategory, str] = {
    ErrorCategory.INPUT_TIMEOUT: (
        f"Pipe ccusage JSON into ccusage-graph.\nUsage: [cyan]{USAGE_HINT}[/cyan]"
    ),
    ErrorCategory.INPUT: "Check that the upstream command finished without errors.",
    ErrorCategory.PARSE: (
        "Make sure ccusage was run with [cyan]--json[/cyan] and its output was not truncated."
    ),
    ErrorCategory.NO_USAGE_DATA: (
        "The JSON needs a non-empty [cyan]daily[/cyan] or [cyan]usage[/cyan] list.\n"
        f"Usage: [cyan]{USAGE_HINT}[/cyan]"
    ),
    ErrorCategory.CONFIGURATION: (
        "Run '[cyan]ccusage-graph config show[/cyan]' to check your configuration, "
        "or '[cyan]ccusage-graph config reset[/cyan]' to restore defaults."
    ),
}


def get_remediation(category: str) -> str | None:
    """Get remediation message for an error category.

    Args:
        category: Error category (e.g., "parse", "input_timeout")

    Returns:
        Remediation message or None
    """
    return REMEDIATION_TEMPLATES.get(category)
