"""genuine CLI - Main Entry Point.

Commands:
    check   - Compile patterns and show their parts or diagnostics
    match   - Match request paths against a pattern
"""

import json
import logging
import sys
from typing import Optional

import click

from . import __version__, __cli_name__
from genuine.config import ConfigError, RoutingConfig
from genuine.patterns import ParseError, Pattern


@click.group()
@click.version_option(version=__version__, prog_name=__cli_name__)
@click.option('--verbose', '-v', is_flag=True, help='Debug logging')
@click.option('--env-file', type=click.Path(dir_okay=False), default=None, help='Load settings from a .env file')
@click.pass_context
def cli(ctx, verbose: bool, env_file: Optional[str]):
    """Compile and try URL path patterns.

    \b
    Quick start:
      genuine check "/users/{id}"
      genuine match "/users/{id}" /users/42 /users/42/posts
    """
    try:
        config = RoutingConfig.load(env_file=env_file)
    except ConfigError as e:
        click.secho(f"Invalid configuration: {e}", fg="red", err=True)
        sys.exit(2)

    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, config.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj['config'] = config


@cli.command('check')
@click.argument('patterns', nargs=-1, required=True)
@click.option('--json-output', '-j', is_flag=True, help='Output as JSON')
def check(patterns, json_output: bool):
    """
    Compile patterns and print their parts.

    Exits with status 1 if any pattern is malformed.

    Examples:
      genuine check "/a/{id}/b"
      genuine check "/a/{1abc}" --json-output
    """
    from .commands.patterns import check_patterns

    results = check_patterns(list(patterns))

    if json_output:
        click.echo(json.dumps(results, indent=2))
    else:
        for result in results:
            if result["ok"]:
                click.secho(f"✓ {result['pattern']}", fg="green")
                for part in result["parts"]:
                    if part["kind"] == "param":
                        click.echo(f"    param    {part['name']}")
                    else:
                        click.echo(f"    literal  {part['value']}")
            else:
                click.secho(f"✗ {result['pattern']}", fg="red")
                click.echo(result["diagnostic"])

    if not all(result["ok"] for result in results):
        sys.exit(1)


@cli.command('match')
@click.argument('pattern')
@click.argument('paths', nargs=-1, required=True)
@click.option('--json-output', '-j', is_flag=True, help='Output as JSON')
@click.pass_context
def match(ctx, pattern: str, paths, json_output: bool):
    """
    Match request paths against PATTERN.

    Paths are normalized the way the route table does it unless the
    GENUINE_STRIP_TRAILING_SLASH setting is off.

    Examples:
      genuine match "/url/with/{parameters}" /url/with/xyz
    """
    from .commands.patterns import match_paths

    try:
        compiled = Pattern.compile(pattern)
    except ParseError as e:
        click.secho(e.format(), fg="red", err=True)
        sys.exit(1)

    config = ctx.obj['config']
    results = match_paths(compiled, list(paths), normalize=config.strip_trailing_slash)

    if json_output:
        click.echo(json.dumps(results, indent=2))
        return

    for result in results:
        if not result["matched"]:
            click.secho(f"✗ {result['path']}  no match", fg="yellow")
            continue
        captured = ", ".join(f"{p['name']}={p['value']!r}" for p in result["params"])
        click.secho(f"✓ {result['path']}  {captured}".rstrip(), fg="green")


def main():
    """Entry point for `genuine` command."""
    cli(obj={})


if __name__ == '__main__':
    main()
