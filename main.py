#!/usr/bin/env python3
"""
SkillBoard server entry point.

Usage:
    uv run python main.py
    uv run python main.py --config config.yaml --port 9000
"""

import argparse
import logging

import uvicorn

from core.config_loader import load_config

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Run the SkillBoard API server")
    parser.add_argument("--config", default="config.yaml", help="Path to config.yaml")
    parser.add_argument("--host", default=None, help="Bind address (overrides config)")
    parser.add_argument("--port", type=int, default=None, help="Port (overrides config)")
    args = parser.parse_args()

    config = load_config(args.config)
    host = args.host or config.web.host
    port = args.port or config.web.port

    from web.backend.app import create_app
    app = create_app(config)

    logger.info(f"Starting SkillBoard API on {host}:{port}")
    logger.info(f"API Docs: http://{host}:{port}/docs")

    uvicorn.run(app, host=host, port=port, log_level="info")


if __name__ == "__main__":
    main()
