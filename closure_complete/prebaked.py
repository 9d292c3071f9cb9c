"""Built-in suggestions for the Closure Library.

Most workspaces consume the Closure Library without generated declaration
files for it. When the index has no entry for ``SENTINEL_NAMESPACE`` these
entries are offered instead.
"""

from __future__ import annotations

from closure_complete.config import ImportInfo

SENTINEL_NAMESPACE = "goog.ui.Component"

# (namespace, module)
_PREBAKED = [
    ("goog.array", True),
    ("goog.asserts", True),
    ("goog.async.nextTick", False),
    ("goog.crypt", True),
    ("goog.crypt.base64", True),
    ("goog.date", True),
    ("goog.dom", True),
    ("goog.dom.classlist", True),
    ("goog.dom.TagName", False),
    ("goog.dom.dataset", True),
    ("goog.events", True),
    ("goog.events.Event", False),
    ("goog.events.EventHandler", False),
    ("goog.events.EventTarget", False),
    ("goog.events.EventType", False),
    ("goog.events.KeyCodes", False),
    ("goog.functions", True),
    ("goog.html.SafeHtml", False),
    ("goog.html.SafeUrl", False),
    ("goog.Disposable", False),
    ("goog.json", True),
    ("goog.log", True),
    ("goog.math", True),
    ("goog.math.Coordinate", False),
    ("goog.math.Size", False),
    ("goog.net.XhrIo", False),
    ("goog.object", True),
    ("goog.Promise", False),
    ("goog.string", True),
    ("goog.style", True),
    ("goog.Timer", False),
    ("goog.ui.Component", False),
    ("goog.ui.Control", False),
    ("goog.ui.Dialog", False),
    ("goog.Uri", False),
    ("goog.userAgent", True),
]

PREBAKED_CLOSURE: list[ImportInfo] = [
    ImportInfo.from_namespace(namespace, module=module, sourcepath="")
    for namespace, module in _PREBAKED
]
