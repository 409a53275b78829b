"""
request_logging — Hello World

Every call the server completes becomes one log line. Request bodies
can be redacted by dotted path, and the line format is pluggable.
"""

import asyncio
import logging

from request_logging import RequestLoggingHook, RpcStatusError, StatusCode

# ─── Your handlers (anything — completely decoupled from the hook) ───

THINGS = {1: {"id": 1, "name": "widget"}}


def get_thing(request: dict) -> dict:
    thing = THINGS.get(request["id"])
    if thing is None:
        raise RpcStatusError(StatusCode.NOT_FOUND, f"thing {request['id']} not found")
    return thing


async def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    # ──────────────────────────────────────
    #  1. Create the hook
    # ──────────────────────────────────────
    hook = RequestLoggingHook(
        "thing_service",
        {
            "formatter": "logstash",
            "log_parameters": True,
            "blacklist": ["auth"],
        },
    )

    # ──────────────────────────────────────
    #  2. Wrap calls
    # ──────────────────────────────────────
    print("\n── Request 1: success ──")
    await hook.outer_around("get_thing", {"id": 1, "auth": {"token": "s3cret"}}, get_thing)

    print("\n── Request 2: not found ──")
    try:
        await hook.outer_around("get_thing", {"id": 2, "auth": {"token": "s3cret"}}, get_thing)
    except RpcStatusError as e:
        print(f"  [FAILED] {e}")


if __name__ == "__main__":
    asyncio.run(main())
