#!/usr/bin/env python3
"""Start the dispatch API, honouring the PORT and HOST environment variables."""

import os
import sys

import uvicorn

port = os.environ.get("PORT", "8000")
try:
    port_int = int(port)
except ValueError:
    print(f"Warning: Invalid PORT value '{port}', using default 8000", file=sys.stderr)
    port_int = 8000

host = os.environ.get("HOST", "0.0.0.0")

if __name__ == "__main__":
    print(f"Starting server on {host}:{port_int}...", file=sys.stderr)
    # Single worker: ledgers live in process memory.
    uvicorn.run(
        "src.dispatch.main:app",
        host=host,
        port=port_int,
        proxy_headers=True,
        forwarded_allow_ips="*",
    )
