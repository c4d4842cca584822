"""Common literal values shared across uidl_pages.

Output-kind identifiers, reserved project keys, and stylesheet locations live
here so generators, plugins, and tests agree on the same strings.

Examples
--------
>>> from uidl_pages import _constants
>>> _constants.ENTRY_FILE_ID
'entry'
>>> _constants.FILE_NAME_TEMPLATE.format(name="home-page", file_type="html")
'home-page.html'
"""

HTML = "html"
CSS = "css"
JS = "js"
JSON = "json"

ENTRY_FILE_ID = "entry"
ROOT_PATH: tuple[str, ...] = ("",)
COMPONENTS_PATH: tuple[str, ...] = ("components",)

STYLE_FILE_NAME = "style"
STYLE_SHEET_HREF = "./style.css"
FILE_NAME_TEMPLATE = "{name}.{file_type}"
