"""Runtime settings for timetype.

Priority chain (highest to lowest):
  1. Init kwargs: explicit overrides from the embedding application
  2. Env vars: ``TIMETYPE_*`` prefix
  3. Code defaults
"""

from __future__ import annotations

from pydantic_settings import BaseSettings


class TimetypeSettings(BaseSettings):
    """Logging switches for the timetype loggers, frozen after construction."""

    model_config = {
        "frozen": True,
        "env_prefix": "TIMETYPE_",
    }

    verbose: bool = False
    log_json: bool = False
