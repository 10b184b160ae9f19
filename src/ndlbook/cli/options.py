# ABOUTME: Shared Click options for ndlbook CLI commands.
# ABOUTME: Provides reusable decorators for common flags like --timeout and --verbose.

import click

from ndlbook.metadata.http import DEFAULT_TIMEOUT

timeout_option = click.option(
    "--timeout",
    type=float,
    default=DEFAULT_TIMEOUT,
    show_default=True,
    help="Seconds to wait for each NDL request.",
)

verbose_option = click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Log outgoing requests and lookup decisions.",
)
