from enum import StrEnum


class OccasionType(StrEnum):
    # User-specific: never a deterministic date
    BIRTHDAY = "birthday"
    ANNIVERSARY = "anniversary"
    CUSTOM = "custom"

    # Fixed Gregorian dates
    CHRISTMAS = "christmas"
    CHRISTMAS_DAY = "christmas_day"
    VALENTINES_DAY = "valentines_day"
    NEW_YEARS_DAY = "new_years_day"
    NEW_YEARS = "new_years"
    INDEPENDENCE_DAY = "independence_day"
    HALLOWEEN = "halloween"
    GROUNDHOG_DAY = "groundhog_day"
    ST_PATRICKS_DAY = "st_patricks_day"
    CINCO_DE_MAYO = "cinco_de_mayo"
    JUNETEENTH = "juneteenth"
    VETERANS_DAY = "veterans_day"
    KWANZAA = "kwanzaa"
    KWANZA = "kwanza"
    MAKAR_SANKRANTI = "makar_sankranti"
    VAISAKHI = "vaisakhi"
    BAISAKHI = "baisakhi"

    # Floating weekday rules
    THANKSGIVING = "thanksgiving"
    MOTHERS_DAY = "mothers_day"
    MOTHERSDAY = "mothersday"
    FATHERS_DAY = "fathers_day"
    FATHERSDAY = "fathersday"
    RECORD_STORE_DAY = "record_store_day"

    # Ecclesiastical / astronomical
    EASTER = "easter"
    SPRING_EQUINOX = "spring_equinox"
    VERNAL_EQUINOX = "vernal_equinox"
    AUTUMN_EQUINOX = "autumn_equinox"
    FALL_EQUINOX = "fall_equinox"
    SUMMER_SOLSTICE = "summer_solstice"
    WINTER_SOLSTICE = "winter_solstice"

    # Lunar / lunisolar
    DIWALI = "diwali"
    HOLI = "holi"
    HANUKKAH = "hanukkah"
    CHANUKAH = "chanukah"
    ROSH_HASHANAH = "rosh_hashanah"
    ROSH_HASHANA = "rosh_hashana"
    YOM_KIPPUR = "yom_kippur"
    PASSOVER = "passover"
    PESACH = "pesach"
    SUKKOT = "sukkot"
    SUKKOS = "sukkos"


class SolarEvent(StrEnum):
    MARCH_EQUINOX = "march_equinox"
    JUNE_SOLSTICE = "june_solstice"
    SEPTEMBER_EQUINOX = "september_equinox"
    DECEMBER_SOLSTICE = "december_solstice"
