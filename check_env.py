#!/usr/bin/env python3
"""Helper script to check and create the .env file for Supabase configuration."""

from pathlib import Path
import sys

TEMPLATE = """# Supabase Configuration (Required for partner and event lookups)
SPOTS_SUPABASE_URL=https://your-project-id.supabase.co
SPOTS_SUPABASE_KEY=your-anon-or-service-key-here

# API Configuration
SPOTS_API_PREFIX=/api
SPOTS_LOG_LEVEL=INFO
# Comma-separated or JSON array: http://localhost:5173,http://127.0.0.1:5173
# SPOTS_FRONTEND_ALLOWED_ORIGINS=

# Search radius heuristic
# SPOTS_DEFAULT_SEARCH_RADIUS_KM=50
# SPOTS_KM_PER_DEGREE=111
# SPOTS_SEARCH_RADIUS_DAMPING=0.7
# SPOTS_MIN_SEARCH_RADIUS_KM=30
# SPOTS_MAX_SEARCH_RADIUS_KM=200
"""


def _mask(value: str) -> str:
    return value if len(value) <= 20 else f"{value[:20]}...{value[-6:]}"


def main() -> int:
    project_root = Path(__file__).parent
    env_file = project_root / ".env"

    if not env_file.exists():
        env_file.write_text(TEMPLATE, encoding="utf-8")
        print(f"Created template .env at {env_file}; add your Supabase credentials and rerun.")
        return 1

    sys.path.insert(0, str(project_root / "src"))
    from spots.config import settings

    print(f"Using {env_file}")
    print(f"  supabase_url: {settings.supabase_url or 'NOT SET'}")
    print(f"  supabase_key: {_mask(settings.supabase_key) if settings.supabase_key else 'NOT SET'}")
    print(
        "  search radius: default "
        f"{settings.default_search_radius_km} km, clamp [{settings.min_search_radius_km}, "
        f"{settings.max_search_radius_km}] km, damping {settings.search_radius_damping}"
    )

    if settings.supabase_url and settings.supabase_key:
        print("Supabase is configured.")
        return 0
    print("Supabase is NOT configured: check the SPOTS_ prefix and restart the server after editing .env")
    return 1


if __name__ == "__main__":
    sys.exit(main())
