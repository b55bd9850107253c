"""
Interactive Fuzzy Selector.

Terminal prompt for picking one option out of a list. Options are shown
in a numbered Rich table; typing a number picks that row, typing text
narrows the list with rapidfuzz ranking.

The call flow takes any function with the Selector signature, so tests
substitute a deterministic one.
"""

from collections.abc import Callable, Sequence

from rapidfuzz import fuzz, process, utils
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from hassctl.core.config import get_app_config
from hassctl.core.exceptions import NothingToSelectError, SelectionCancelledError
from hassctl.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

Selector = Callable[[str, Sequence[str]], int]
"""select(prompt, options) -> index into options."""

SCORE_CUTOFF = 60


def rank_options(query: str, options: Sequence[str], limit: int) -> list[int]:
    """
    Return indices of the best matching options, best first.

    An empty query keeps the given order.
    """
    if not query:
        return list(range(min(len(options), limit)))
    matches = process.extract(
        query,
        list(options),
        scorer=fuzz.WRatio,
        processor=utils.default_process,
        limit=limit,
        score_cutoff=SCORE_CUTOFF,
    )
    return [index for _, _, index in matches]


def _render(
    console: Console,
    prompt: str,
    options: Sequence[str],
    candidates: list[int],
    query: str,
) -> None:
    title = f"{prompt} ({len(candidates)} of {len(options)})"
    if query:
        title += f" matching '{query}'"
    table = Table(title=escape(title), show_header=False, box=None)
    table.add_column("#", style="cyan", justify="right")
    table.add_column(prompt)
    for position, index in enumerate(candidates, start=1):
        table.add_row(str(position), escape(options[index]))
    console.print(table)


def fuzzy_select(
    prompt: str,
    options: Sequence[str],
    *,
    console: Console | None = None,
    max_length: int | None = None,
) -> int:
    """
    Ask the user to pick one option.

    Args:
        prompt: Label shown above the list and in the input prompt.
        options: Option labels.
        console: Rich console to use. Defaults to a new Console.
        max_length: Rows shown at once. Defaults to selector.max_length
            in application.yaml.

    Returns:
        Index of the chosen option in `options`.

    Raises:
        NothingToSelectError: If options is empty.
        SelectionCancelledError: If the user hits Ctrl-C or EOF.
    """
    if not options:
        raise NothingToSelectError(f"No {prompt.lower()} to choose from")

    console = console or Console()
    limit = max_length or get_app_config().application.selector.max_length
    labels = list(options)
    query = ""

    while True:
        candidates = rank_options(query, labels, limit)
        _render(console, prompt, labels, candidates, query)

        try:
            answer = console.input(
                f"[bold cyan]{escape(prompt)}[/bold cyan] [dim](number or search)[/dim]: "
            ).strip()
        except (EOFError, KeyboardInterrupt) as e:
            raise SelectionCancelledError(f"{prompt} selection cancelled") from e

        if not answer:
            if len(candidates) == 1:
                return candidates[0]
            continue

        if answer.isascii() and answer.isdigit():
            position = int(answer)
            if 1 <= position <= len(candidates):
                return candidates[position - 1]
            console.print(f"[red]No row numbered {position}[/red]")
            continue

        if answer in labels:
            return labels.index(answer)

        matches = rank_options(answer, labels, limit)
        if len(matches) == 1:
            log_with_source(logger, "selector", "debug", "Single match", prompt=prompt, query=answer)
            return matches[0]
        if not matches:
            console.print(f"[yellow]No matches for '{escape(answer)}'[/yellow]")
            query = ""
            continue
        query = answer
