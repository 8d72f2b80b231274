"""
minicurl command line.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from dataclasses import replace

import click
from rich.console import Console
from rich.markup import escape

from minicurl import __version__
from minicurl.config import get_config
from minicurl.errors import HttpError, MinicurlError, NetworkError
from minicurl.logging_config import configure_logging
from minicurl.url.validator import validate_url
from minicurl.http.request import BodyKind, RequestSpec, build_request
from minicurl.http.client import HTTPResponse, send_request
from minicurl.http.render import render


def report_error(console: Console, error: MinicurlError, verbose: bool = False) -> None:
    """Print an error to stderr."""
    label = "[red bold]Fatal:[/red bold]" if error.fatal else "[red]Error:[/red]"
    console.print(f"{label} {escape(error.message)}", soft_wrap=True)

    if verbose:
        if isinstance(error, NetworkError) and error.reason:
            console.print(f"  [dim]{escape(error.reason)}[/dim]", soft_wrap=True)
        if isinstance(error, HttpError) and error.body_snippet:
            console.print(f"  [dim]{escape(error.body_snippet)}[/dim]", soft_wrap=True)


def show_request(console: Console, spec: RequestSpec) -> None:
    console.print(f"[cyan]Requesting URL:[/cyan] {escape(str(spec.url))}", soft_wrap=True)
    host = f"[{spec.url.host}] (IPv6)" if spec.url.is_ipv6 else spec.url.host
    console.print(f"[cyan]Host:[/cyan] {escape(host)}", soft_wrap=True)
    console.print(f"[cyan]Method:[/cyan] {spec.method}")
    if spec.body_kind is BodyKind.FORM:
        console.print(f"[cyan]Data:[/cyan] {escape(spec.content.decode('ascii'))}", soft_wrap=True)
    elif spec.body_kind is BodyKind.JSON:
        console.print(f"[cyan]JSON:[/cyan] {escape(spec.json_payload)}", soft_wrap=True)


def show_response(console: Console, resp: HTTPResponse) -> None:
    if resp.is_success:
        status_color = "green"
    elif resp.is_redirect:
        status_color = "yellow"
    else:
        status_color = "red"

    console.print(f"[{status_color}]{resp.status_code} {escape(resp.reason)}[/{status_color}] "
                  f"({resp.elapsed_ms:.0f}ms)")
    console.print(f"[dim]Content-Type: {escape(resp.content_type or 'N/A')} | "
                  f"Size: {resp.content_length:,} bytes[/dim]")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("url")
@click.option("-X", "--request", "method", default="GET", show_default=True,
              help="HTTP method (GET or POST)")
@click.option("-d", "--data", help="Form data for a POST request (key1=value1&key2=value2)")
@click.option("--json", "json_data", help="JSON body for a POST request (implies POST)")
@click.option("-t", "--timeout", type=float, help="Request timeout in seconds")
@click.option("-k", "--insecure", is_flag=True, help="Disable SSL verification")
@click.option("--no-follow", is_flag=True, help="Do not follow redirects")
@click.option("-v", "--verbose", is_flag=True, help="Show request and response details on stderr")
@click.option("--debug", is_flag=True, help="Enable debug logging on stderr")
@click.option("--log-file", type=click.Path(dir_okay=False), help="Also write logs to this file")
@click.version_option(__version__, prog_name="minicurl")
def main(url: str, method: str, data: str | None, json_data: str | None,
         timeout: float | None, insecure: bool, no_follow: bool, verbose: bool,
         debug: bool, log_file: str | None):
    """Make an HTTP request to URL and print the response body.

    JSON responses are pretty-printed with sorted keys; anything else is
    printed exactly as received. Errors go to stderr.

    Examples:
        minicurl https://example.com/
        minicurl https://jsonplaceholder.typicode.com/posts -d "userId=1&title=Hello"
        minicurl https://dummyjson.com/posts/add --json '{"title": "World", "userId": 5}'
    """
    config = get_config()
    if timeout is not None:
        config = replace(config, timeout=timeout)
    if insecure:
        config = replace(config, verify_ssl=False)
    if no_follow:
        config = replace(config, follow_redirects=False)

    configure_logging(verbose=verbose, debug=debug, default_level=config.log_level,
                      log_file=log_file)
    console = Console(stderr=True)

    try:
        validated = validate_url(url)
        spec = build_request(validated, method=method, data=data, json_data=json_data)
        if verbose:
            show_request(console, spec)

        resp = send_request(spec, config)
        if verbose:
            show_response(console, resp)

        rendered = render(resp)
    except MinicurlError as e:
        report_error(console, e, verbose)
        raise SystemExit(e.exit_code)

    output = rendered.data + b"\n" if rendered.is_json else rendered.data
    click.echo(output, nl=False)


if __name__ == "__main__":
    main()
