"""Italian locations with their Tiempo forecast codes."""

from wtr.models.location import Location

LOCATIONS: tuple[Location, ...] = (
    Location(
        name="ACQUASPARTA",
        province="TR",
        latitude=42.6911449,
        longitude=12.5464788,
        code="28756",
    ),
    Location(
        name="MONTECASTRILLI",
        province="TR",
        latitude=42.652434,
        longitude=12.488567,
        code="30429",
    ),
    Location(
        name="ORVIETO",
        province="TR",
        latitude=42.7186152,
        longitude=12.1087907,
        code="30625",
    ),
    Location(
        name="TERNI",
        province="TR",
        latitude=42.5641417,
        longitude=12.6405466,
        code="31553",
    ),
    Location(
        name="PERUGIA",
        province="PG",
        latitude=43.1119613,
        longitude=12.3890104,
        code="30721",
    ),
)
