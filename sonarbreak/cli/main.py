import click
from pathlib import Path

from sonarbreak import __version__
from sonarbreak.config.loader import load_config
from sonarbreak.config.logs import LoggingConfig
from sonarbreak.utils.logging import setup_logging

from .commands.check import check
from .commands.config import config


class CliContext:
    def __init__(self, config: dict):
        self.config = config


@click.group(context_settings=dict(help_option_names=['-h', '--help']))
@click.option('--config', 'config_path', type=click.Path(exists=True, dir_okay=False), help='Path to a configuration file.')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging.')
@click.option('--json-logs', is_flag=True, help='Render log lines as JSON.')
@click.version_option(version=__version__)
@click.pass_context
def main(ctx, config_path, verbose, json_logs):
    """
    sonarbreak: a quality gate over Sonar preview reports.
    """
    # stderr logging has to be in place before config files are read
    setup_logging(log_level="DEBUG" if verbose else "WARNING", json_logs=json_logs)
    try:
        raw_config = load_config(str(Path.cwd()), config_file=config_path)
    except ValueError as e:
        raise click.UsageError(str(e))

    logging_config = LoggingConfig(**(raw_config.get('logging') or {}))
    setup_logging(
        log_level="DEBUG" if verbose else logging_config.level,
        json_logs=json_logs or logging_config.json_logs,
    )

    ctx.obj = CliContext(config=raw_config)


main.add_command(check)
main.add_command(config)

if __name__ == '__main__':
    main()
