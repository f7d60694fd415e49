"""Common literal values used across folio_pages.

These constants keep the site defaults centralized so the configuration
loader, the pagination helpers, and tests import the same values without
drifting. Intended for internal use within the folio_pages package.

Examples
--------
>>> from folio_pages import _constants
>>> _constants.DEFAULT_HREF_TEMPLATE.replace("{{id}}", "2")
'{{baseHref}}/browse/2'
>>> _constants.DEFAULT_PER_PAGE
9
"""

DEFAULT_ARTICLES_URL = "https://nick.af/articles"
DEFAULT_HREF_TEMPLATE = "{{baseHref}}/browse/{{id}}"
DEFAULT_PER_PAGE = 9
