"""Common literal values used across bps_pages.

These constants keep filenames, titles, and the static asset manifest in one
place so the config loader, builder, and tests agree on the defaults.

Examples
--------
>>> from bps_pages import _constants
>>> _constants.RECORD_EXTENSION
'.jsonld'
>>> "bps.css" in _constants.DEFAULT_ASSETS
True
"""

RECORD_EXTENSION = ".jsonld"
INDEX_FILENAME = "index.html"
IMAGES_DIRNAME = "images"
INDEX_TITLE = "The Bread Poets' Society: recipes in verse"

SHELL_TEMPLATE = "layout.jinja"
ITEM_TEMPLATE = "recipe.jinja"
LISTING_TEMPLATE = "index.jinja"

DEFAULT_ASSETS: tuple[str, ...] = (
    "bps.css",
    "CNAME",
    "robots.txt",
    "favicon.ico",
    "bread1.gif",
    "img_4638_small.jpg",
    "lemony_chickpea.jpg",
    "pancakes-small.jpg",
    "smack-pie.jpg",
    "why.html",
    "colorgame.html",
)
