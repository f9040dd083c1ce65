"""
CLI for checking discovery setups: resolve, env-names.
Options not given on the command line come from DISCOVERY_* environment variables.
"""
import json
from typing import List, Optional

import typer

from svcdiscovery.config import DiscoveryConfig, parse_resolvers, parse_schemes
from svcdiscovery.discovery_module import DiscoveryModule
from svcdiscovery.env import host_variable, port_variable
from svcdiscovery.errors import InvalidConfiguration, ResolutionError
from svcdiscovery.log_config import configure_logging

app = typer.Typer(help="Service discovery CLI: resolve a port name of a service to a URL.")


@app.command()
def resolve(
    port_name: str = typer.Argument(..., help="Port name (e.g. api, grpc)"),
    service_name: str = typer.Argument(..., help="Service name or SRV domain (e.g. orders.default.svc.cluster.local)"),
    proto: Optional[str] = typer.Option(None, "--proto", "-p", help="SRV transport protocol: tcp or udp"),
    resolver: Optional[List[str]] = typer.Option(None, "--resolver", "-r", help="Resolver to try, in order: dns, env (repeatable)"),
    scheme: Optional[List[str]] = typer.Option(None, "--scheme", "-s", help="Port name to scheme mapping, e.g. api=http (repeatable)"),
    as_json: bool = typer.Option(False, "--json", help="Print URL parts as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every resolver attempt"),
) -> None:
    """Resolve PORT_NAME of SERVICE_NAME and print the URL."""
    try:
        config = DiscoveryConfig.load_from_env()
        if proto:
            config.proto = proto.lower()
        if resolver:
            config.resolvers = parse_resolvers(",".join(resolver))
        if scheme:
            config.schemes.update(parse_schemes(",".join(scheme)))
        configure_logging("DEBUG" if verbose else config.log_level, json=config.log_json)
        discovery = DiscoveryModule.from_config(config).build()
    except InvalidConfiguration as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(2)

    try:
        url = discovery.resolve(port_name, service_name)
    except ResolutionError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps({"url": str(url), "scheme": url.scheme, "host": url.host}))
    else:
        typer.echo(str(url))


@app.command()
def env_names(
    port_name: str = typer.Argument(..., help="Port name"),
    service_name: str = typer.Argument(..., help="Service name"),
) -> None:
    """Print the host and port environment variable names read for SERVICE_NAME/PORT_NAME."""
    typer.echo(host_variable(service_name))
    typer.echo(port_variable(port_name, service_name))


def main() -> None:
    """Entry point for the svcdiscovery console command."""
    app()


if __name__ == "__main__":
    main()
