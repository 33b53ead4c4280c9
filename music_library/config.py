"""
Library configuration.

Both settings are optional and read from the environment:

  MUSIC_LIBRARY_LOCALE        collation locale for name/title ordering
                              (e.g. "fi_FI.UTF-8"); unset adopts the user's
                              environment locale (LC_ALL / LC_COLLATE / LANG)
  MUSIC_LIBRARY_SEARCH_LIMIT  default cap on search results; unset means no cap
"""

import locale
import os
from typing import Optional

from loguru import logger
from pydantic import BaseModel, Field


class LibraryConfig(BaseModel):
    """Settings for a LibraryService instance."""

    collation_locale: Optional[str] = Field(
        None,
        description=(
            "LC_COLLATE locale name. Applied process-wide when a LibraryService is "
            "created, so it also changes how every other instance sorts"
        ),
    )
    default_search_limit: Optional[int] = Field(
        None, ge=0, description="Result cap used when a search call passes none"
    )

    @classmethod
    def from_env(cls) -> "LibraryConfig":
        """Build a config from MUSIC_LIBRARY_* environment variables."""
        limit = os.environ.get("MUSIC_LIBRARY_SEARCH_LIMIT")
        return cls(
            collation_locale=os.environ.get("MUSIC_LIBRARY_LOCALE") or None,
            default_search_limit=int(limit) if limit else None,
        )


def apply_collation_locale(name: Optional[str]) -> bool:
    """
    Switch the process-wide LC_COLLATE to *name*; "" means the locale the
    environment asks for.

    Returns False (and keeps the current locale) when the locale is not
    available on this system.
    """
    if name is None:
        return False
    try:
        locale.setlocale(locale.LC_COLLATE, name)
    except locale.Error as e:
        logger.warning(f"Collation locale {name!r} unavailable ({e}), keeping current locale.")
        return False
    logger.debug(f"Collation locale set to {locale.setlocale(locale.LC_COLLATE)}")
    return True
