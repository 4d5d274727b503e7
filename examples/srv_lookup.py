"""
Example: discovering a service through DNS SRV records.

Usage:
    SRVDISCO_LOG_LEVEL=DEBUG python examples/srv_lookup.py example.com api https
"""

import asyncio
import sys

from srvdisco import Failed, configure_logging, discover_addrs_ports, stream_discover


async def main(domain: str, service: str, scheme: str) -> int:
    configure_logging()

    # Incremental consumption
    async with stream_discover(domain, service, scheme) as stream:
        async for endpoint in stream:
            print("found", endpoint.url)

    if isinstance(stream.outcome, Failed):
        print("lookup failed:", stream.outcome.error)
        return 1

    # Collected in one call
    result = await discover_addrs_ports(domain, service)
    print("addresses:", ", ".join(result))
    return 0


if __name__ == "__main__":
    if len(sys.argv) != 4:
        print(__doc__)
        sys.exit(2)
    sys.exit(asyncio.run(main(*sys.argv[1:4])))
