#!/usr/bin/env python3
"""
Agent API key lifecycle example

This example demonstrates:
1. Creating an agent API key
2. Listing the project's agent API keys
3. Deleting the key again
"""

import asyncio
import logging
import os

from opsmngr import AgentAPIKeysRequest, OpsManagerClient


async def main():
    project_id = os.getenv("OPSMNGR_PROJECT_ID", "5e66185d917b220fbd8bb4d1")

    async with OpsManagerClient() as client:
        # Step 1: Create a key
        print("Creating agent API key...")
        key = await client.agents.create_agent_api_key(
            project_id,
            AgentAPIKeysRequest(desc="Example agent API key"),
        )
        print(f"Created key: {key.id}")

        # Step 2: List keys
        print("\nListing agent API keys...")
        for item in await client.agents.list_agent_api_keys(project_id):
            creator = item.created_user_id or "-"
            print(f"[{item.created_by}] {item.id} {item.desc} (user: {creator})")

        # Step 3: Delete the key
        print("\nDeleting agent API key...")
        await client.agents.delete_agent_api_key(project_id, key.id)

    print("\nExample complete!")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
