"""CLI entry point for sovereign-agent.

Invoked as::

    sovereign-agent [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m sovereign_agent.cli.main

Agents live for a single invocation; nothing is persisted between runs.
"""
from __future__ import annotations

import logging

import click
from pydantic import ValidationError
from rich.console import Console

from sovereign_agent.agent import Agent
from sovereign_agent.config import AgentConfig, load_config_from_env
from sovereign_agent.exceptions import ConfigError, NotifyError
from sovereign_agent.identity import IdentityGenerator

console = Console()
error_console = Console(stderr=True, style="bold red")


def _resolve_config(endpoint: str | None, timeout: float | None) -> AgentConfig:
    """Environment config with command-line overrides applied."""
    try:
        config = load_config_from_env()
    except ConfigError as exc:
        error_console.print(str(exc), markup=False)
        raise SystemExit(1) from exc
    try:
        return AgentConfig(
            endpoint=config.endpoint if endpoint is None else endpoint,
            timeout=config.timeout if timeout is None else timeout,
        )
    except ValidationError as exc:
        error_console.print(f"Invalid option: {exc}", markup=False)
        raise SystemExit(1) from exc


def _print_identity(lines: list[str]) -> None:
    for line in lines:
        console.print(line)
    console.print()


def _send(agent: Agent, message: str) -> None:
    try:
        body = agent.notify(message)
    except NotifyError as exc:
        error_console.print(f"Failed to communicate: {exc}", markup=False)
        raise SystemExit(1) from exc
    console.print(f"Message sent: {message}", markup=False)
    console.print(f"Response: {body}", markup=False)


endpoint_option = click.option(
    "--endpoint",
    "-e",
    default=None,
    help="Notification endpoint URL (overrides SOVEREIGN_AGENT_ENDPOINT).",
)
timeout_option = click.option(
    "--timeout",
    "-t",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Request timeout in seconds (overrides SOVEREIGN_AGENT_TIMEOUT).",
)


# ---------------------------------------------------------------------------
# Root group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="sovereign-agent")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Self-sovereign agent: local identity, in-memory storage, HTTP notify"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# ---------------------------------------------------------------------------
# identity
# ---------------------------------------------------------------------------


@cli.command(name="identity")
def identity_command() -> None:
    """Mint a fresh identity and print it."""
    _print_identity(IdentityGenerator().generate().describe())


# ---------------------------------------------------------------------------
# demo
# ---------------------------------------------------------------------------


@cli.command(name="demo")
@click.option("--key", default="sample_data", show_default=True, help="Key to store.")
@click.option(
    "--value",
    default="This is a decentralized storage example.",
    show_default=True,
    help="Value to store.",
)
@click.option(
    "--message",
    "-m",
    default="Hello from Self-Sovereign AI!",
    show_default=True,
    help="Message to send.",
)
@endpoint_option
@timeout_option
def demo_command(
    key: str, value: str, message: str, endpoint: str | None, timeout: float | None
) -> None:
    """Create an agent, store and retrieve one entry, then notify."""
    config = _resolve_config(endpoint, timeout)
    package_logger = logging.getLogger("sovereign_agent")
    previous_level = package_logger.level
    if not package_logger.isEnabledFor(logging.INFO):
        package_logger.setLevel(logging.INFO)
    try:
        with Agent(config) as agent:
            _print_identity(agent.identity.describe())

            agent.store_data(key, value)
            retrieved = agent.retrieve_data(key)
            if retrieved is not None:
                console.print(f"Retrieved Data: {retrieved}", markup=False)
            else:
                console.print("Data not found.")

            _send(agent, message)
    finally:
        package_logger.setLevel(previous_level)


# ---------------------------------------------------------------------------
# notify
# ---------------------------------------------------------------------------


@cli.command(name="notify")
@click.argument("message")
@endpoint_option
@timeout_option
def notify_command(message: str, endpoint: str | None, timeout: float | None) -> None:
    """Send MESSAGE from a freshly created agent."""
    config = _resolve_config(endpoint, timeout)
    with Agent(config) as agent:
        console.print(f"From: {agent.did}", markup=False)
        _send(agent, message)


if __name__ == "__main__":
    cli()
