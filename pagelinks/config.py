from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

from pagelinks.schemas.navigation import parse_window_policy


class Settings(BaseSettings):
    # Page links
    # "all", "hide" or "ellipsis:<n>"
    PAGINATION_PAGE_LINKS: Optional[str] = None
    PAGINATION_LINK_ARIA_LABEL: Optional[str] = None  # format string, e.g. "Page {page}"

    # Link contents
    PAGINATION_PREVIOUS_LINK_CONTENT: Optional[str] = None
    PAGINATION_NEXT_LINK_CONTENT: Optional[str] = None
    PAGINATION_ELLIPSIS_CONTENT: Optional[str] = None

    # CSS classes
    PAGINATION_DISABLED_CLASS: Optional[str] = None
    PAGINATION_WRAPPER_CLASS: Optional[str] = None
    PAGINATION_LIST_CLASS: Optional[str] = None
    PAGINATION_LINK_CLASS: Optional[str] = None
    PAGINATION_CURRENT_LINK_CLASS: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=True, extra="ignore"
    )

    @field_validator("PAGINATION_PAGE_LINKS")
    @classmethod
    def validate_page_links(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            parse_window_policy(v)
        return v


settings = Settings()  # type: ignore
