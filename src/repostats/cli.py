"""CLI interface for repostats"""

import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional

import click

from repostats.application.stats_service import StatsService
from repostats.domain.colors import color_for, hex_to_rgb
from repostats.domain.config import COMMON_IGNORE_RULES
from repostats.domain.models.category_stat import CategoryStat
from repostats.domain.models.stats_state import StatsState
from repostats.infrastructure.config.config_manager import ConfigManager, ConfigurationError
from repostats.infrastructure.github.client import GitHubClient
from repostats.infrastructure.http_client import retry_config_from_dict

logger = logging.getLogger(__name__)

BAR_WIDTH = 40


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration"""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )
    logging.getLogger().setLevel(level)
    for logger_name in logging.Logger.manager.loggerDict:
        logging.getLogger(logger_name).setLevel(level)


def _die(message: str, verbose: bool = False, exc: Optional[Exception] = None) -> None:
    """Exit with a user-friendly error message"""
    if exc is not None:
        logger.error(message, exc_info=verbose)
    else:
        logger.error(message)
    raise click.ClickException(message)


def _load_config(ctx) -> ConfigManager:
    try:
        return ConfigManager(config_path=ctx.obj.get("config_path"))
    except ConfigurationError as e:
        _die(str(e), verbose=ctx.obj.get("verbose", False), exc=e)


def build_ignore_rules(
    defaults: Iterable[str],
    ignore: Iterable[str] = (),
    keep: Iterable[str] = (),
) -> set:
    """Apply CLI toggles to the configured ignore rules

    Args:
        defaults: Rules active before any toggling
        ignore: Rules to switch on
        keep: Rules to switch off

    Returns:
        Active rule set
    """
    state = StatsState(ignore_rules=set(defaults))
    for rule in ignore:
        if rule not in state.ignore_rules:
            state.toggle_ignore(rule)
    for rule in keep:
        if rule in state.ignore_rules:
            state.toggle_ignore(rule)
    return state.ignore_rules


def render_bar(percentage: str, width: int = BAR_WIDTH) -> int:
    """Number of filled cells for a percentage string"""
    filled = round(float(percentage) / 100 * width)
    return max(0, min(width, filled))


def _output_stats(stats: List[CategoryStat], state: StatsState) -> None:
    """Output statistics as colored bars

    Args:
        stats: Computed statistics
        state: State the statistics were computed for
    """
    click.echo(f"\nStatistics for {state.username}/{state.repository} ({state.mode}):\n")

    name_width = max(len(stat.category) for stat in stats)
    for stat in stats:
        filled = render_bar(stat.percentage)
        bar = click.style("█" * filled, fg=hex_to_rgb(color_for(stat.category)))
        bar += "░" * (BAR_WIDTH - filled)
        click.echo(
            f"{stat.category.ljust(name_width)}  {bar}  "
            f"{stat.percentage}% ({stat.kilobytes:.2f} KB)"
        )

    click.echo("")
    click.echo(f"Total: {state.total_bytes / 1024:.2f} KB in {len(stats)} categories")
    if state.mode == "tree":
        click.echo(f"Files: {state.files_total} ({state.files_ignored} ignored)")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to .repostats.yml config file",
)
@click.pass_context
def cli(ctx, verbose: bool, config: Path):
    """repostats - language statistics for GitHub repositories"""
    ctx.ensure_object(dict)
    setup_logging(verbose)
    ctx.obj["config_path"] = config
    ctx.obj["verbose"] = verbose


@cli.command()
@click.argument("username", type=str)
@click.argument("repository", type=str)
@click.option(
    "--mode",
    type=click.Choice(["tree", "languages"], case_sensitive=False),
    help="Aggregate tree files by extension, or use GitHub's language listing. Overrides config.",
)
@click.option("--ignore", "ignore", multiple=True, help="Ignore rule to switch on (repeatable)")
@click.option("--keep", "keep", multiple=True, help="Configured ignore rule to switch off (repeatable)")
@click.option("--no-default-ignore", is_flag=True, help="Start from an empty ignore list")
@click.option(
    "--apply-ignore-to-languages/--no-apply-ignore-to-languages",
    default=None,
    help="Match ignore rules against language names in languages mode. Overrides config.",
)
@click.option("--branch", type=str, help="Only fetch the tree of this branch")
@click.option(
    "--sort",
    type=click.Choice(["bytes", "name", "none"], case_sensitive=False),
    help="Display order. Overrides config.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Output format",
)
@click.pass_context
def stats(
    ctx,
    username: str,
    repository: str,
    mode: str,
    ignore: tuple,
    keep: tuple,
    no_default_ignore: bool,
    apply_ignore_to_languages: Optional[bool],
    branch: str,
    sort: str,
    output_format: str,
):
    """Show the language breakdown of a GitHub repository.

    USERNAME: GitHub user or organization

    REPOSITORY: Repository name
    """
    verbose = ctx.obj.get("verbose", False)
    config_manager = _load_config(ctx)

    github_config = config_manager.get_github_config()
    stats_config = config_manager.get_stats_config()

    retry_config = retry_config_from_dict(config_manager.get_retry_config().model_dump())
    github_client = GitHubClient(
        api_url=github_config.api_url,
        branches=[branch] if branch else github_config.branches,
        timeout=github_config.timeout,
        retry_config=retry_config,
    )

    if apply_ignore_to_languages is None:
        apply_ignore_to_languages = stats_config.apply_ignore_to_languages
    service = StatsService(
        github_client,
        apply_ignore_to_languages=apply_ignore_to_languages,
        sort=(sort or stats_config.sort).lower(),
    )

    defaults = [] if no_default_ignore else config_manager.get_ignore_rules()
    state = StatsState(
        username=username.strip(),
        repository=repository.strip(),
        ignore_rules=build_ignore_rules(defaults, ignore, keep),
        mode=(mode or stats_config.mode).lower(),
    )
    logger.info(f"Ignore rules: {', '.join(sorted(state.ignore_rules)) or '(none)'}")

    result = service.fetch_stats(state)
    if result is None:
        _die(state.error or "Failed to compute statistics", verbose=verbose)

    if output_format.lower() == "json":
        click.echo(json.dumps([stat.to_dict() for stat in result], indent=2))
    else:
        _output_stats(result, state)


@cli.command("ignore-rules")
@click.option("--ignore", "ignore", multiple=True, help="Ignore rule to switch on (repeatable)")
@click.option("--keep", "keep", multiple=True, help="Configured ignore rule to switch off (repeatable)")
@click.pass_context
def ignore_rules(ctx, ignore: tuple, keep: tuple):
    """List common ignore rules, marking the active ones."""
    config_manager = _load_config(ctx)
    active = build_ignore_rules(config_manager.get_ignore_rules(), ignore, keep)

    click.echo("Select files/folders to ignore:")
    for rule in COMMON_IGNORE_RULES:
        mark = "x" if rule in active else " "
        click.echo(f"  [{mark}] {rule}")

    extra = sorted(active - set(COMMON_IGNORE_RULES))
    for rule in extra:
        click.echo(f"  [x] {rule}")


def main():
    """Main entry point"""
    cli(obj={})


if __name__ == "__main__":
    main()
