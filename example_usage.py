#!/usr/bin/env python3
"""
Basic usage examples for the EdgeGrid client library.

This script signs and verifies a request offline, then reads a zone and
its recordsets using the credentials from an .edgerc file.
"""

import sys

from edgegrid_client import (
    EdgeDNSClient,
    EdgeGridClient,
    EdgeGridError,
    FastDNSClient,
    load_edgerc,
    parse_header,
    sign,
    verify,
)


def demonstrate_signing(credentials):
    """Sign a request and check it the way a receiving party would."""

    print("1. Signing a request offline...")
    path = "/config-dns/v1/zones/example.com"
    header = sign(credentials, "GET", path, b"")
    info = parse_header(header)
    print(f"   Client token: {info.client_token}")
    print(f"   Timestamp: {info.timestamp}")
    print(f"   Nonce: {info.nonce}")
    print(f"   Signature: {info.signature}")

    is_valid = verify(credentials, "GET", path, b"", info)
    print(f"   Verification: {'✓ Valid' if is_valid else '✗ Invalid'}")

    is_valid = verify(credentials, "GET", path + "x", b"", info)
    print(f"   Tampered path: {'✗ Accepted' if is_valid else '✓ Rejected'}")
    print()


def main(edgerc_path="~/.edgerc", section="default", zone="example.com"):
    """Run basic usage examples."""

    print("=== EdgeGrid Python Client Basic Usage Examples ===\n")

    try:
        credentials = load_edgerc(edgerc_path, section)
    except EdgeGridError as e:
        print(f"Cannot load credentials: {e}")
        sys.exit(1)

    print(f"   Host: {credentials.host}")
    print(f"   Client token: {credentials.client_token[:8]}...\n")

    demonstrate_signing(credentials)

    with EdgeGridClient(credentials, timeout=60) as client:
        print(f"2. Fetching zone {zone}...")
        try:
            zr = FastDNSClient(client).get_zone(zone)
            print(f"   ✓ Zone token: {zr.token}")
            print(f"   SOA: {zr.zone.get('soa')}")
        except EdgeGridError as e:
            print(f"   ✗ Zone request failed: {e}")
        print()

        print(f"3. Listing recordsets of {zone}...")
        try:
            resp = EdgeDNSClient(client).list_recordsets(zone, page_size=10)
            for rs in resp.recordsets:
                print(f"   {rs.name} {rs.type} {rs.ttl} {' '.join(rs.rdata)}")
            print(f"   ✓ {resp.metadata.total_elements} recordsets in total")
        except EdgeGridError as e:
            print(f"   ✗ Recordset request failed: {e}")
        print()


if __name__ == "__main__":
    main(*sys.argv[1:4])
