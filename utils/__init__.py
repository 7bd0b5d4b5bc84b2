"""
===============================================================================
Focusify Utilities Initialization
===============================================================================
Exposes core utility modules for the web shell:
- Configuration loading
- Template engine
- Template error types
"""

# Configuration
from .config import (
    DEFAULT_PORT,
    Config,
    load_config,
)

# Template Engine
from .template_engine import (
    DEFAULT_BUNDLE_DIR,
    TemplateEngine,
)

# Errors
from .errors import (
    TemplateError,
    TemplateLoadError,
    RenderError,
)

# Exports
__all__ = [
    # config
    "DEFAULT_PORT", "Config", "load_config",

    # template_engine
    "DEFAULT_BUNDLE_DIR", "TemplateEngine",

    # errors
    "TemplateError", "TemplateLoadError", "RenderError",
]
