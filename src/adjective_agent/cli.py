"""adjective-agent CLI entry point.

Commands:
    analyze     Describe photo record(s) with adjectives
    learn       Learn vocabulary from free text
    add         Add a custom word to a category
    stats       Show vocabulary statistics
    categories  List vocabulary categories
    words       List the words of a category
    frequent    Show the most frequently learned words
    export      Export the vocabulary snapshot
    import      Replace the vocabulary from a snapshot
    config      View/edit configuration

The vocabulary is kept in a JSON snapshot between runs (see --vocab).
"""

import dataclasses
import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from adjective_agent import __version__
from adjective_agent.api import AdjectiveAgent
from adjective_agent.app_config import AppConfig
from adjective_agent.constants import APP_NAME, DEFAULT_FREQUENT_LIMIT, ExitCode
from adjective_agent.exceptions import AdjectiveAgentError, ConfigError
from adjective_agent.models import AdjectiveResult, AnalysisOptions
from adjective_agent.storage.snapshot import load_snapshot, save_snapshot
from adjective_agent.utils.config import get_value, load_config, save_config, set_value

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _configure_logging(debug: bool) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def _fail(message: str, code: ExitCode = ExitCode.GENERAL_ERROR) -> None:
    console.print(f"[red]Error: {message}[/red]")
    sys.exit(code)


def _config(ctx: click.Context) -> dict:
    """Load the user config once per invocation."""
    if "config" not in ctx.obj:
        try:
            ctx.obj["config"] = load_config()
        except ConfigError as e:
            _fail(str(e), ExitCode.INVALID_INPUT)
    return ctx.obj["config"]


def _snapshot_path(ctx: click.Context) -> Path:
    """Resolve the vocabulary snapshot: --vocab, then config, then app default."""
    if ctx.obj.get("vocab_path"):
        return Path(ctx.obj["vocab_path"])

    configured = get_value(_config(ctx), "storage.snapshot", "")
    if configured:
        return Path(configured).expanduser()
    return AppConfig(ctx.obj["app"]).vocab_snapshot


def _load_agent(ctx: click.Context) -> AdjectiveAgent:
    """Create an agent with the persisted vocabulary, if any."""
    path = _snapshot_path(ctx)
    agent = AdjectiveAgent()
    if path.exists():
        try:
            agent.import_vocabulary(load_snapshot(path))
        except (AdjectiveAgentError, OSError) as e:
            _fail(f"Cannot load vocabulary {path}: {e}", ExitCode.INVALID_INPUT)
        logger.debug(f"Loaded vocabulary from {path}")
    return agent


def _save_agent(ctx: click.Context, agent: AdjectiveAgent) -> None:
    path = _snapshot_path(ctx)
    try:
        save_snapshot(agent.export_vocabulary(), path)
    except OSError as e:
        _fail(f"Cannot save vocabulary {path}: {e}")


def _read_photos(photo_file: str) -> list[dict]:
    """Read photo records from a JSON file or stdin.

    Accepts a single photo object, a list of photos, or ``{"photos": [...]}``.
    """
    with click.open_file(photo_file) as f:
        data = json.load(f)

    if isinstance(data, dict) and "photos" in data:
        data = data["photos"]
    if isinstance(data, dict):
        return [data]
    if isinstance(data, list) and all(isinstance(p, dict) for p in data):
        return data
    raise ValueError("Expected a photo object, a list of photos or a 'photos' key")


@click.group()
@click.version_option(version=__version__, prog_name=APP_NAME)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--app", default=APP_NAME, show_default=True, help="App name for an isolated vocabulary")
@click.option(
    "--vocab",
    "vocab_path",
    type=click.Path(dir_okay=False),
    help="Vocabulary snapshot file (default: storage.snapshot or the app data dir)",
)
@click.pass_context
def main(ctx: click.Context, debug: bool, app: str, vocab_path: str | None) -> None:
    """adjective-agent - Describe photos with words from a growing vocabulary."""
    ctx.ensure_object(dict)
    _configure_logging(debug)
    ctx.obj["debug"] = debug
    ctx.obj["app"] = app
    ctx.obj["vocab_path"] = vocab_path


# ============================================================================
# ANALYZE COMMAND
# ============================================================================


@main.command()
@click.argument("photo_file", type=click.Path(allow_dash=True))
@click.option("--max", "max_adjectives", type=click.IntRange(min=0), help="Maximum adjectives per photo")
@click.option("--categories/--no-categories", default=None, help="Group adjectives by category")
@click.option("--enhance/--no-enhance", default=None, help="Build an enhanced description")
@click.option("--learn/--no-learn", default=None, help="Learn vocabulary from the photos")
@click.option("--expand/--legacy", default=None, help="Use the learned vocabulary or the legacy path")
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON")
@click.option("--dry-run", is_flag=True, help="Do not save vocabulary learned from the photos")
@click.pass_context
def analyze(
    ctx: click.Context,
    photo_file: str,
    max_adjectives: int | None,
    categories: bool | None,
    enhance: bool | None,
    learn: bool | None,
    expand: bool | None,
    as_json: bool,
    dry_run: bool,
) -> None:
    """Describe photo record(s) with adjectives.

    PHOTO_FILE is a JSON file ('-' for stdin) holding one photo object,
    a list of photos, or {"photos": [...]}.

    Examples:

        adjective-agent analyze photo.json

        cat photos.json | adjective-agent analyze - --max 5 --json
    """
    try:
        photos = _read_photos(photo_file)
    except FileNotFoundError:
        _fail(f"File not found: {photo_file}", ExitCode.FILE_NOT_FOUND)
    except (OSError, ValueError) as e:
        _fail(f"Invalid photo file: {e}", ExitCode.INVALID_INPUT)

    options = AnalysisOptions.from_config(_config(ctx))
    overrides = {
        "max_adjectives": max_adjectives,
        "include_categories": categories,
        "enhance_description": enhance,
        "learn_from_input": learn,
        "expand_vocabulary": expand,
    }
    options = dataclasses.replace(options, **{k: v for k, v in overrides.items() if v is not None})

    agent = _load_agent(ctx)
    results = agent.analyze_batch(photos, options)

    if options.learn_from_input and not dry_run:
        _save_agent(ctx, agent)

    if as_json:
        payload = [r.to_dict() for r in results]
        click.echo(json.dumps(payload[0] if len(payload) == 1 else payload, indent=2))
        return

    for result in results:
        _print_result(result)


def _print_result(result: AdjectiveResult) -> None:
    """Pretty print an analysis result."""
    console.print(f"\n[bold]{result.photo_id or '(no id)'}[/bold]")
    console.print(f"  [cyan]Adjectives:[/cyan] {', '.join(result.adjectives) or '-'}")
    for category, words in result.categories.items():
        console.print(f"    [dim]{category}:[/dim] {', '.join(words)}")
    if result.enhanced_description:
        console.print(f"  [cyan]Description:[/cyan] {result.enhanced_description}")
    console.print(f"  [cyan]Confidence:[/cyan] {result.confidence:.2f}")


# ============================================================================
# LEARNING COMMANDS
# ============================================================================


@main.command()
@click.argument("text", nargs=-1)
@click.option("--context", help="Context label (default: learning.default_context)")
@click.option(
    "-f",
    "--file",
    "text_file",
    type=click.Path(exists=True, dir_okay=False),
    help="Learn from each non-empty line of a file",
)
@click.option("--json", "as_json", is_flag=True, help="Print learned words as JSON")
@click.pass_context
def learn(
    ctx: click.Context,
    text: tuple,
    context: str | None,
    text_file: str | None,
    as_json: bool,
) -> None:
    """Learn vocabulary from free text.

    Examples:

        adjective-agent learn "A misty, windswept and rugged coastline"

        adjective-agent learn --file captions.txt --context caption
    """
    texts = [" ".join(text)] if text else []
    if text_file:
        lines = Path(text_file).read_text().splitlines()
        texts.extend(line for line in lines if line.strip())

    if not texts:
        _fail("Nothing to learn: pass TEXT or --file", ExitCode.INVALID_INPUT)

    context = context or get_value(_config(ctx), "learning.default_context", "general")
    agent = _load_agent(ctx)
    learned = agent.learn_from_text_batch(texts, context)
    _save_agent(ctx, agent)

    if as_json:
        click.echo(json.dumps(learned))
        return

    if not learned:
        console.print("[dim]No new words found[/dim]")
        return
    console.print(f"[green]Learned {len(learned)} words under '{context}':[/green] {', '.join(learned)}")


@main.command()
@click.argument("word")
@click.argument("category")
@click.option("--context", help="Context label (default: learning.custom_context)")
@click.pass_context
def add(ctx: click.Context, word: str, category: str, context: str | None) -> None:
    """Add WORD to CATEGORY, creating the category if needed."""
    context = context or get_value(_config(ctx), "learning.custom_context", "custom")
    agent = _load_agent(ctx)
    agent.add_custom_word(word, category, context)
    _save_agent(ctx, agent)
    console.print(f"[green]Added '{word.lower().strip()}' to {category}[/green]")


# ============================================================================
# VOCABULARY COMMANDS
# ============================================================================


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Print statistics as JSON")
@click.pass_context
def stats(ctx: click.Context, as_json: bool) -> None:
    """Show vocabulary statistics."""
    agent = _load_agent(ctx)
    vocab_stats = agent.get_stats()

    if as_json:
        click.echo(json.dumps(vocab_stats.to_dict(), indent=2))
        return

    table = Table(title="Vocabulary Statistics")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Total Words", str(vocab_stats.total_words))
    table.add_row("Categories", str(vocab_stats.category_count))
    table.add_row("Learned Words", str(vocab_stats.learned_count))
    table.add_row("", "")
    for category, count in vocab_stats.category_counts.items():
        table.add_row(f"  {category}", str(count))

    console.print(table)


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Print categories as JSON")
@click.pass_context
def categories(ctx: click.Context, as_json: bool) -> None:
    """List vocabulary categories."""
    agent = _load_agent(ctx)
    names = agent.get_all_categories()
    custom = set(agent.store.get_custom_categories())

    if as_json:
        click.echo(json.dumps(names))
        return

    for name in names:
        marker = " [dim](custom)[/dim]" if name in custom else ""
        console.print(f"  [cyan]{name}[/cyan]: {len(agent.get_words_by_category(name))} words{marker}")


@main.command()
@click.argument("category")
@click.option("--json", "as_json", is_flag=True, help="Print words as JSON")
@click.pass_context
def words(ctx: click.Context, category: str, as_json: bool) -> None:
    """List the words of CATEGORY."""
    agent = _load_agent(ctx)
    category_words = agent.get_words_by_category(category)

    if as_json:
        click.echo(json.dumps(category_words))
        return

    if not category_words:
        console.print(f"[dim]No words in category '{category}'[/dim]")
        return
    console.print(", ".join(category_words))


@main.command()
@click.option("--limit", default=DEFAULT_FREQUENT_LIMIT, type=click.IntRange(min=0), help="Maximum results")
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON")
@click.pass_context
def frequent(ctx: click.Context, limit: int, as_json: bool) -> None:
    """Show the most frequently learned words."""
    agent = _load_agent(ctx)
    ranked = agent.get_most_frequent(limit)

    if as_json:
        click.echo(json.dumps([{"word": w, "frequency": n} for w, n in ranked], indent=2))
        return

    if not ranked:
        console.print("[dim]No words learned yet[/dim]")
        return

    table = Table(title="Most Frequent Words")
    table.add_column("Word", style="cyan")
    table.add_column("Frequency", justify="right")
    for word, count in ranked:
        table.add_row(word, str(count))
    console.print(table)


@main.command("export")
@click.argument("output", type=click.Path(dir_okay=False))
@click.pass_context
def export_vocabulary(ctx: click.Context, output: str) -> None:
    """Export the vocabulary snapshot to OUTPUT."""
    agent = _load_agent(ctx)
    try:
        save_snapshot(agent.export_vocabulary(), output)
    except OSError as e:
        _fail(f"Cannot write {output}: {e}")
    console.print(f"[green]Vocabulary exported to {output}[/green]")


@main.command("import")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def import_vocabulary(ctx: click.Context, input_file: str) -> None:
    """Replace the vocabulary with the snapshot in INPUT_FILE."""
    agent = AdjectiveAgent()
    try:
        agent.import_vocabulary(load_snapshot(input_file))
    except (AdjectiveAgentError, OSError) as e:
        _fail(str(e), ExitCode.INVALID_INPUT)

    _save_agent(ctx, agent)
    vocab_stats = agent.get_stats()
    console.print(
        f"[green]Imported {vocab_stats.total_words} words in "
        f"{vocab_stats.category_count} categories[/green]"
    )


# ============================================================================
# CONFIG COMMANDS
# ============================================================================


@main.group()
def config() -> None:
    """View and edit configuration."""
    pass


@config.command("show")
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Show current configuration."""
    from adjective_agent.utils.config import get_config_path

    cfg = _config(ctx)
    console.print(f"[dim]Config file: {get_config_path()}[/dim]\n")
    console.print_json(json.dumps(cfg))


@config.command("get")
@click.argument("key")
@click.pass_context
def config_get(ctx: click.Context, key: str) -> None:
    """Get a configuration value.

    KEY is a dot-separated path (e.g., analysis.max_adjectives)
    """
    value = get_value(_config(ctx), key)
    if value is None:
        console.print(f"[yellow]Key '{key}' not found[/yellow]")
        sys.exit(ExitCode.INVALID_INPUT)

    click.echo(f"{key} = {json.dumps(value)}")


@config.command("set")
@click.argument("key")
@click.argument("value")
@click.pass_context
def config_set(ctx: click.Context, key: str, value: str) -> None:
    """Set a configuration value.

    KEY is TABLE.NAME of a known setting (e.g., analysis.max_adjectives)
    VALUE is parsed as JSON when possible (10, true, "text") and must
    match the type of the default
    """
    cfg = _config(ctx)
    try:
        parsed_value = json.loads(value)
    except json.JSONDecodeError:
        parsed_value = value

    try:
        set_value(cfg, key, parsed_value)
    except ConfigError as e:
        _fail(str(e), ExitCode.INVALID_INPUT)
    save_config(cfg)
    console.print(f"[green]Set {key} = {parsed_value}[/green]")


if __name__ == "__main__":
    main()
