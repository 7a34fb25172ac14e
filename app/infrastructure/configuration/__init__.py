"""Infrastructure configuration module - public API.

Centralized configuration using pydantic-settings.

Exports:
    settings: Singleton Settings instance
    Settings: Main settings class (for testing/overrides)

Example:
    ```python
    from infrastructure.configuration import settings

    aws_region = settings.aws.AWS_REGION
    ```
"""

from infrastructure.configuration.settings import Settings, settings

__all__ = ["Settings", "settings"]
