import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Suggestions
    suggest_min_query_length: int = 3    # shorter queries never classify
    suggest_max_results: int = 20
    top_items_limit: int = 10

    # Badge colours
    badge_neutral_color: str = "#9ca3af"
    badge_text_light: str = "#f9fafb"
    badge_text_dark: str = "#111827"
    badge_contrast_threshold: float = 0.55  # luminance above this gets dark text
    badge_border_alpha: float = 0.45
    badge_border_fallback: str = "rgba(107,114,128,0.45)"

    # Log
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


def configure_logging() -> None:
    """Root logging setup for applications embedding the suggestion engine."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
