"""이벤트 유형 상수"""


class EventTypes:
    """이벤트 유형 문자열 상수"""

    # catalog
    CATALOG_LOADED = "catalog_loaded"

    # ammo_compat
    AMMO_COMPAT_COMPLETED = "ammo_compat_completed"
    AMMO_COMPAT_SKIPPED = "ammo_compat_skipped"
    AMMO_COMPAT_FAILED = "ammo_compat_failed"
