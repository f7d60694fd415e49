"""Load and validate the site configuration YAML for folio builds.

This subpackage parses the project's ``site.yaml`` file and produces the typed
:class:`SiteConfig` consumed by article preparation and the CLI. The primary
entry point is :func:`load_site_config`, which applies defaults for missing
keys and rejects invalid values with :class:`SiteConfigError`.

Examples
--------
>>> from pathlib import Path
>>> from folio_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.articles_url  # doctest: +SKIP
'https://nick.af/articles'
"""

from .loader import load_site_config
from .models import SiteConfig, SiteConfigError

__all__ = ["SiteConfig", "SiteConfigError", "load_site_config"]
