"""Settings — environment variables and explicit overrides in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — values passed by the caller
  2. Env vars     — ``TYPEWISE_*`` prefix
  3. Code defaults

Settings only steer diagnostics. Classification never depends on them.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings


class TypewiseSettings(BaseSettings):
    """Diagnostic settings for typewise.

    Attributes:
        verbose: Emit the library's DEBUG events (assertion failures,
            combinator rejections).
        log_json: Render log records as JSON lines instead of console text.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TYPEWISE_",
    }

    verbose: bool = False
    log_json: bool = False
