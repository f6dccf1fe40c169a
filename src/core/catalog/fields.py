"""논리 필드별 허용 철자. 앞에 있는 이름이 우선."""

PROPERTIES = ("_props", "Properties")

# 탄약 판정
CALIBER = ("Caliber", "caliber")
DAMAGE = ("Damage", "damage")
PENETRATION = ("PenetrationPower", "penetrationPower")

# 화이트리스트 위치
CHAMBERS = ("Chambers", "chambers")
CARTRIDGES = ("Cartridges", "cartridges")
SLOTS = ("Slots", "slots")
FILTER_GROUPS = ("filters", "Filters")
FILTER = ("Filter", "filter")
