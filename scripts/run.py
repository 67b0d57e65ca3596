#!/usr/bin/env python3
"""
Mediaboard Startup Script
"""

import shutil
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))


def generate_env_file():
    """Generate .env file if it doesn't exist"""
    env_path = Path(__file__).parent.parent / ".env"
    env_example = Path(__file__).parent.parent / ".env.example"

    if env_path.exists():
        return

    if env_example.exists():
        shutil.copyfile(env_example, env_path)
        print("Generated .env file from .env.example - set TMDB_API_KEY before use")
    else:
        print("Warning: .env.example not found, using default configuration")


def main():
    """Run the web server"""
    import uvicorn

    generate_env_file()

    from mediaboard.config import settings

    if not settings.TMDB_API_KEY:
        print("Warning: TMDB_API_KEY is not set, media pages will return 503")

    print(f"Listening on http://{settings.HOST}:{settings.PORT}")

    uvicorn.run(
        "mediaboard.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=False,
        log_level=settings.LOG_LEVEL,
        access_log=True,
    )


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        pass
