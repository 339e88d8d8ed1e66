"""
Basic Usage Example

This example walks through a typical indexer test:
- Building block events
- Extending the reference indexer with a transfer rule
- Running the indexer in a test environment
- Capturing state and rolling back after a reorg

Run with: python examples/basic_usage.py
"""

import asyncio

from indexkit import IndexContext, Indexer, handles
from indexkit.events import BlockEvent
from indexkit.testing import EventBuilder, TestEnvironment

# =============================================================================
# Step 1: Define an Indexer
# =============================================================================
# The reference Indexer records every event in the "events" collection.
# Subclasses add rules without changing that output.


class TransferIndexer(Indexer):
    """Tracks transfers per block alongside the raw event log."""

    @handles("Transfer")
    async def _on_transfer(self, context: IndexContext, event: BlockEvent) -> None:
        await context.save("transfers", {"block": event.block, "amount": event.data["amount"]})


def transfer(block: int, amount: int) -> BlockEvent:
    return (
        EventBuilder()
        .block(block)
        .with_address("0x123")
        .with_data({"type": "Transfer", "amount": amount})
        .build()
    )


# =============================================================================
# Step 2: Index, capture, roll back
# =============================================================================


async def main() -> None:
    print("=" * 60)
    print("indexkit basic usage")
    print("=" * 60)

    env = TestEnvironment(TransferIndexer())

    print("\n1. Indexing block 1:")
    await env.mock_event(transfer(1, 100))
    result = await env.run_indexer()
    print(f"   Processed {result.events_processed} event(s)")

    checkpoint = await env.get_state()
    print(f"   Checkpoint: {checkpoint}")

    print("\n2. Indexing block 2:")
    await env.mock_event(transfer(2, 50))
    result = await env.run_indexer()
    print(f"   Processed {result.events_processed} event(s)")
    print(f"   State: {await env.get_state()}")

    print("\n3. Rolling back to the checkpoint:")
    await env.set_state(checkpoint)
    await env.assert_state(checkpoint)
    print(f"   State: {await env.get_state()}")
    print(f"   Pending events: {len(env.pending_events)}")

    print("\n" + "=" * 60)
    print("Example completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
