"""String renderings of a validated NSN.

These assume a 9-digit NSN; callers validate first.
"""

from __future__ import annotations

from sophone.core.normalize import COUNTRY_CODE, TRUNK_PREFIX


def to_e164(nsn: str) -> str:
    """``611234567`` -> ``+252611234567``."""
    return f"+{COUNTRY_CODE}{nsn}"


def to_local(nsn: str) -> str:
    """``611234567`` -> ``0611 234 567``."""
    return f"{TRUNK_PREFIX}{nsn[0:3]} {nsn[3:6]} {nsn[6:9]}"


def to_international(nsn: str) -> str:
    """``611234567`` -> ``+252 61 123 4567``."""
    return f"+{COUNTRY_CODE} {nsn[0:2]} {nsn[2:5]} {nsn[5:9]}"
