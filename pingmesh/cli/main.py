"""Main CLI application for pingmesh."""

import logging

import click

from ..config import PingerConfig
from ..monitoring import MetricsContext, MetricsRegistrationError
from ..server import PingerService

logger = logging.getLogger(__name__)


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, debug):
    """pingmesh - mesh health-check instrumentation."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    ctx.ensure_object(dict)
    ctx.obj['debug'] = debug


@cli.command()
@click.option('--hostname', envvar='HOSTNAME', help='Reporting instance name (default: machine hostname)')
@click.option('--host', envvar='PINGMESH_HOST', default='0.0.0.0', show_default=True, help='Host to bind to')
@click.option('--port', envvar='PINGMESH_PORT', type=click.IntRange(1, 65535), default=8080,
              show_default=True, help='Port to bind to')
@click.option('--error-type', 'error_types', multiple=True,
              help='Allowed error type (repeatable); others are recorded as "other"')
@click.pass_context
def serve(ctx, hostname, host, port, error_types):
    """Serve /metrics, /stats and /ping for this instance."""
    settings = {"host": host, "port": port}
    if hostname:
        settings["hostname"] = hostname
    if error_types:
        settings["error_types"] = list(error_types)
    config = PingerConfig(**settings)

    try:
        metrics = MetricsContext.create(config)
    except MetricsRegistrationError as e:
        click.echo(f"✗ Could not set up metrics: {e}", err=True)
        ctx.exit(1)

    click.echo(f"✓ Metrics ready for instance {config.hostname}")
    service = PingerService(config, metrics)
    service.run(debug=ctx.obj.get('debug', False))


def main():
    """Entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()
