#!/usr/bin/env python3
"""Basic usage example for sovereign-agent.

This example demonstrates:
- Creating an agent with a fresh identity
- Storing and retrieving data
- Sending a notification, synchronously and with asyncio
"""

import asyncio
import logging

from sovereign_agent import Agent, NotifyError, load_config_from_env


def main():
    """Run basic agent operations."""
    logging.basicConfig(level=logging.INFO)

    # Endpoint and timeout come from SOVEREIGN_AGENT_* variables
    agent = Agent(load_config_from_env())
    for line in agent.identity.describe():
        print(line)

    print("\nStoring data...")
    agent.store_data("sample_data", "This is a decentralized storage example.")

    value = agent.retrieve_data("sample_data")
    if value is not None:
        print(f"Retrieved Data: {value}")
    else:
        print("Data not found.")

    print("\nSending notification...")
    try:
        body = agent.notify("Hello from Self-Sovereign AI!")
        print(f"Response: {body}")
    except NotifyError as e:
        print(f"Failed to communicate ({e.kind.value}): {e}")

    print("\nSending notification with asyncio...")
    try:
        body = asyncio.run(agent.anotify("Hello again, asynchronously."))
        print(f"Response: {body}")
    except NotifyError as e:
        print(f"Failed to communicate ({e.kind.value}): {e}")

    # Stored data survives a failed notification
    print(f"\nStill stored: {agent.retrieve_data('sample_data')}")

    agent.close()
    print("\nDone!")


if __name__ == "__main__":
    main()
