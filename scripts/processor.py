#!/usr/bin/env python3
"""Serve the cloudjobs processor endpoint that Cloud Tasks POSTs job payloads to.

Usage:
  CLOUDJOBS_SECRET=... WORKER_MODULES=myapp.workers python scripts/processor.py

Environment variables:
- WORKER_MODULES: comma separated modules to import so their workers register
- HOST / PORT (optional, default 0.0.0.0:8080)
- LOG_LEVEL (optional, default INFO)
"""
import importlib
import logging
import os

import uvicorn

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
WORKER_MODULES = [m.strip() for m in os.getenv("WORKER_MODULES", "").split(",") if m.strip()]


def load_workers(modules):
    for name in modules:
        importlib.import_module(name)


def run_processor():
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    load_workers(WORKER_MODULES)
    from cloudjobs.main import app
    from cloudjobs.registry import default_registry

    logging.getLogger(__name__).info("processor: serving %d worker(s)", len(default_registry.names()))
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    run_processor()
