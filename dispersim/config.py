"""Global configuration for envelope computation and rendering.

Module-level constants are typed with the unit system so they can be used
directly in geometry calls.
"""

from dispersim.unit import Degree, Meter

# Spherical Earth model
EARTH_RADIUS = Meter(6_371_000)

# Tessellation density
LINE_STEPS = 50
ARC_POINTS = 150

# Explosive munition: fixed splash offset for lines H/I
EXPLOSIVE_SPLASH_ANGLE = Degree(25)

# |sin|, |tan| below this are treated as zero
TRIG_EPSILON = 1e-12

# Parameter form defaults
DEFAULT_LATITUDE = -23.5505
DEFAULT_LONGITUDE = -46.6333
DEFAULT_FIRING_BEARING = Degree(0)
DEFAULT_DISPERSION_ANGLE = Degree(5)
DEFAULT_RANGE_DISTANCE = Meter(5474)
DEFAULT_ANGLE_P = Degree(24)
DEFAULT_DISTANCE_W = Meter(1225)
DEFAULT_DISTANCE_A = Meter(615)
DEFAULT_DISTANCE_B = Meter(615)
DEFAULT_MAX_HEIGHT = Meter(1090)

# Line/arc styles: color, weight, opacity, dash pattern
CENTERLINE_STYLE = ("#FF0000", 4, 0.8, "5, 5")
DISPERSION_STYLE = ("#00AA00", 4, 0.8, "2, 2")
SAFETY_STYLE = ("#0000FF", 4, 0.8, "1, 1")
EXPLOSIVE_STYLE = ("#FF0000", 4, 0.8, "1, 1")
RANGE_ARC_STYLE = ("#0000FF", 3, 0.9, "8, 4")
OUTER_ARC_STYLE = ("#FF0000", 4, 0.7, "10, 5")

END_MARKER_RADIUS = 5

# Map
MAP_ZOOM = 13
MAP_MAX_ZOOM = 19
MAP_ATTRIBUTION = "© OpenStreetMap contributors"
TILE_LAYERS = {
    "Standard": "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png",
    "Satellite": "https://server.arcgisonline.com/ArcGIS/rest/services/World_Imagery/MapServer/tile/{z}/{y}/{x}",
    "Terrain": "https://{s}.tile.opentopomap.org/{z}/{x}/{y}.png",
}
