#!/usr/bin/env python3
"""
Application startup script with environment configuration support.
"""

import argparse
import os
import sys
from typing import Dict

from author_dict.config.loader import ConfigLoader, load_config_for_environment
from author_dict.config.settings import Settings


def worker_environment(settings: Settings) -> Dict[str, str]:
    """
    Environment variables that rebuild ``settings`` in a worker process.

    Reload and multi-worker servers import ``author_dict.main:app`` in fresh
    processes, so command line overrides only reach them this way.
    """
    return {
        "ENVIRONMENT": settings.environment.value,
        "DEBUG": str(settings.debug).lower(),
        "LOG_LEVEL": settings.log_level.value,
        "DATABASE_URL": settings.database.url,
    }


def main():
    """Main startup function with environment configuration"""
    parser = argparse.ArgumentParser(description="Author's Dictionary Server")
    parser.add_argument(
        "--env",
        choices=["development", "staging", "production", "testing"],
        default=None,
        help="Environment to run (default: from ENVIRONMENT env var or development)"
    )
    parser.add_argument("--host", default=None, help="Host to bind to (overrides config)")
    parser.add_argument("--port", type=int, default=None, help="Port to bind to (overrides config)")
    parser.add_argument(
        "--database-url",
        default=None,
        help="SQLAlchemy URL of the sentence store (overrides config)"
    )
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload (overrides config)")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode (overrides config)")
    parser.add_argument(
        "--list-envs",
        action="store_true",
        help="List available environment configurations"
    )
    parser.add_argument(
        "--validate-env",
        help="Validate a specific environment configuration"
    )

    args = parser.parse_args()

    if args.list_envs:
        envs = ConfigLoader.get_available_environments()
        print("Available environment configurations:")
        for env in envs:
            print(f"  - {env}")
        return

    if args.validate_env:
        if ConfigLoader.validate_environment_config(args.validate_env):
            print(f"✓ Environment '{args.validate_env}' configuration is valid")
        else:
            print(f"✗ Environment '{args.validate_env}' configuration is invalid or missing")
            sys.exit(1)
        return

    try:
        settings = load_config_for_environment(args.env)
        print(f"✓ Loaded configuration for environment: {settings.environment.value}")
    except ValueError as e:
        print(f"✗ Failed to load configuration: {e}")
        sys.exit(1)

    # Apply command line overrides
    if args.host:
        settings.host = args.host
    if args.port:
        settings.port = args.port
    if args.database_url:
        settings.database.url = args.database_url
    if args.reload:
        settings.reload = True
    if args.debug:
        settings.debug = True

    print(f"🚀 Starting {settings.app_name} v{settings.app_version}")
    print(f"   Environment: {settings.environment.value}")
    print(f"   Host: {settings.host}")
    print(f"   Port: {settings.port}")
    print(f"   Database: {settings.database.url}")
    print(f"   Dictionary API: {settings.dictionary.api_url}")
    print(f"   Log Level: {settings.log_level.value}")

    import uvicorn

    if settings.reload or settings.workers > 1:
        # Workers import the app themselves and read settings from the environment
        os.environ.update(worker_environment(settings))
        target = "author_dict.main:app"
    else:
        from author_dict.main import create_app
        target = create_app(settings)

    uvicorn.run(
        target,
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        workers=settings.workers if not settings.reload else 1,
        log_level=settings.log_level.value.lower(),
        access_log=False,
    )


if __name__ == "__main__":
    main()
