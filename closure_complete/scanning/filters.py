"""Suppression rules for namespaces that should never be suggested.

Two mechanisms apply to every declaration a scan detects:

* the wildcard blacklist drops any namespace under one of a few generated
  i18n symbol tables, which would otherwise flood the suggestion list;
* the deprecated set drops a namespace *and* arms a skip-run, so its nested
  namespaces (``goog.ui.TabPane.Events`` after ``goog.ui.TabPane``) are
  dropped too until a declaration outside that prefix appears.
"""

from __future__ import annotations

from dataclasses import dataclass

WILDCARD_BLACKLIST = (
    "goog.i18n.CompactNumberFormatSymbols",
    "goog.i18n.DateTimePatterns",
    "goog.i18n.DateTimeSymbols",
    "goog.i18n.NumberFormatSymbols",
    "goog.labs.i18n.ListFormat",
)

DEPRECATED = frozenset({
    "goog.Delay",
    "goog.Throttle",
    "goog.dom.classes",
    "goog.fs.Error.ErrorCode",
    "goog.fx.Animation.EventType",
    "goog.fx.Animation.State",
    "goog.graphics",
    "goog.i18n.currencyCodeMapTier2",
    "goog.i18n.currencyCodeMap",
    "goog.json.EvalJsonProcessor",
    "goog.net.MockIFrameIo",
    "goog.result",
    "goog.structs.Map",
    "goog.structs.Set",
    "goog.testing.AsyncTestCase",
    "goog.testing.ContinuationTestCase",
    "goog.testing.DeferredTestCase",
    "goog.ui.AttachableMenu",
    "goog.ui.Button.Side",
    "goog.ui.ImagelessButtonRenderer",
    "goog.ui.ImagelessMenuButtonRenderer",
    "goog.ui.Menu.EventType",
    "goog.ui.MenuBase",
    "goog.ui.ServerChart",
    "goog.ui.TabPane",
    "goog.vec.ArrayType",
    "goog.History.EventType",
    "goog.History.Event",
})


@dataclass
class FilterState:
    """Per-file filter state. ``skip`` is the armed prefix, empty when idle."""
    skip: str = ""


def is_blacklisted(namespace: str) -> bool:
    return namespace.startswith(WILDCARD_BLACKLIST)


def is_deprecated(namespace: str) -> bool:
    return namespace in DEPRECATED


def admit_namespace(namespace: str, state: FilterState) -> bool:
    """Decide whether a freshly declared namespace may be indexed.

    Mutates ``state`` to arm or disarm the skip-run.
    """
    if state.skip:
        if namespace.startswith(state.skip):
            return False
        state.skip = ""

    if is_blacklisted(namespace):
        return False

    if is_deprecated(namespace):
        state.skip = f"{namespace}."
        return False

    return True
