# loadgate/page.py
"""
Page: root host type carrying the default display check.

loadgate does not talk to browsers. A concrete page (or an adapter over a
driver) supplies the three members the display check reads:

- is_displayed(): whether the page currently matches its expected location
- current_url: where the browser actually is, for the diagnostic
- url_matcher: what the page expects, for the diagnostic
"""

from __future__ import annotations

from typing import Any, Optional

from loadgate.core.loadable import Loadable


class Page(Loadable):
    """
    Base class for page objects.

    Its first load validation is the display check, unless
    ``default_load_validations`` is turned off in the configuration.
    Subclasses inherit that check and never receive a second copy.
    """

    default_load_validation = True

    current_url: Optional[str] = None
    url_matcher: Any = None

    def is_displayed(self) -> bool:
        raise NotImplementedError(
            f"{type(self).__name__} must implement is_displayed() to use the default load validation"
        )


__all__ = ["Page"]
