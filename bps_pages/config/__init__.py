"""Load and validate the recipe site configuration.

This subpackage parses the project's ``site.yaml`` file and produces a typed
:class:`SiteConfig` naming the data, template, asset, and output locations.
The primary entry point is :func:`load_site_config`; callers without a file
use :meth:`SiteConfig.from_root` to get the conventional layout.

Examples
--------
>>> from pathlib import Path
>>> from bps_pages.config import SiteConfig
>>> SiteConfig.from_root(Path("site")).data_dir
PosixPath('site/data/recipes')
"""

from .loader import load_site_config
from .models import PACKAGE_TEMPLATES_DIR, SiteConfig, SiteConfigError, TemplateNames

__all__ = [
    "PACKAGE_TEMPLATES_DIR",
    "SiteConfig",
    "SiteConfigError",
    "TemplateNames",
    "load_site_config",
]
