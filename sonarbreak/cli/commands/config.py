import click
import yaml

from sonarbreak.config.loader import validate_config


@click.group()
def config():
    """Inspect the sonarbreak configuration."""
    pass


@config.command('show')
@click.pass_context
def show(ctx):
    """Show the effective configuration after merging all layers."""
    click.echo(yaml.safe_dump(ctx.obj.config, default_flow_style=False, sort_keys=True))


@config.command('validate')
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
def validate(path):
    """Validate a configuration file."""
    try:
        with open(path, 'r') as f:
            config_data = yaml.safe_load(f) or {}
        validate_config(config_data)
    except (yaml.YAMLError, ValueError) as e:
        click.echo(f"Configuration file is invalid:\n{e}", err=True)
        raise click.exceptions.Exit(1)
    click.echo("Configuration file is valid.")
