"""Shared CLI utilities."""

import asyncio


def get_components():
    """Initialize the store and history from config."""
    from cli.config import load_config
    from mood.history import MoodHistory
    from mood.storage import KeyValueStore

    config = load_config()
    store = KeyValueStore(config.paths.store_db)
    history = MoodHistory(store, key=config.storage.history_key)

    return {
        "config": config,
        "store": store,
        "history": history,
    }


def run(coro):
    """Run a store coroutine from synchronous click handlers."""
    return asyncio.run(coro)
