"""
Location geometry utilities
---------------------------

Point classification and shape validation for plan locations. Coordinates are
in PDF points (world space of the plan page).
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Optional, Sequence, Tuple

# -----------------------------------------------------------------------------
# Application
# -----------------------------------------------------------------------------
from ..domain.models.location import Location, LocationType, RectangleBounds, Vertex

BoundingBox = Tuple[float, float, float, float]

MIN_SHAPE_AREA = 1.0
VERTEX_TOLERANCE = 0.001


def point_in_rectangle(point: Tuple[float, float], bounds: RectangleBounds) -> bool:
    """True if point (x, y) is inside or on the edge of the rectangle."""
    x, y = point
    return (
        bounds.x <= x <= bounds.x + bounds.width
        and bounds.y <= y <= bounds.y + bounds.height
    )


def calculate_bounding_box(vertices: Sequence[Vertex]) -> BoundingBox:
    """(min_x, min_y, max_x, max_y) of the vertices; zeros when empty."""
    if not vertices:
        return (0.0, 0.0, 0.0, 0.0)
    xs = [vertex.x for vertex in vertices]
    ys = [vertex.y for vertex in vertices]
    return (min(xs), min(ys), max(xs), max(ys))


def point_in_polygon(point: Tuple[float, float], vertices: Sequence[Vertex]) -> bool:
    """True if point (x, y) is inside polygon (ray-casting). Polygon needs at least 3 vertices."""
    n = len(vertices)
    if n < 3:
        return False

    x, y = point
    min_x, min_y, max_x, max_y = calculate_bounding_box(vertices)
    if not (min_x <= x <= max_x and min_y <= y <= max_y):
        return False

    inside = False
    p1x, p1y = vertices[0].x, vertices[0].y
    for i in range(1, n + 1):
        p2x, p2y = vertices[i % n].x, vertices[i % n].y
        if y > min(p1y, p2y) and y <= max(p1y, p2y) and x <= max(p1x, p2x):
            if p1y != p2y:
                xinters = (y - p1y) * (p2x - p1x) / (p2y - p1y) + p1x
            else:
                xinters = p1x
            if p1x == p2x or x <= xinters:
                inside = not inside
        p1x, p1y = p2x, p2y
    return inside


def classify_point(point: Tuple[float, float], location: Location) -> bool:
    """True if the point lies inside the location (rectangle or polygon)."""
    if location.type == LocationType.RECTANGLE:
        if location.bounds is None:
            return False
        return point_in_rectangle(point, location.bounds)
    if not location.vertices:
        return False
    return point_in_polygon(point, location.vertices)


def calculate_polygon_area(vertices: Sequence[Vertex]) -> float:
    """Unsigned polygon area (shoelace formula)."""
    if len(vertices) < 3:
        return 0.0
    area = 0.0
    for i, current in enumerate(vertices):
        following = vertices[(i + 1) % len(vertices)]
        area += current.x * following.y - following.x * current.y
    return abs(area) / 2


def auto_close_polygon(vertices: Sequence[Vertex]) -> list:
    """Drop the last vertex when it repeats the first (closed path)."""
    vertices = list(vertices)
    if len(vertices) < 2:
        return vertices
    first, last = vertices[0], vertices[-1]
    if abs(first.x - last.x) < VERTEX_TOLERANCE and abs(first.y - last.y) < VERTEX_TOLERANCE:
        return vertices[:-1]
    return vertices


def validate_polygon_vertices(vertices: Sequence[Vertex]) -> Optional[str]:
    """Return an error message if the polygon is invalid, None otherwise."""
    unique = {(round(vertex.x * 1000), round(vertex.y * 1000)) for vertex in vertices}
    if len(unique) < 3:
        return "Polygon must have at least 3 unique vertices"
    if calculate_polygon_area(vertices) < MIN_SHAPE_AREA:
        return "Polygon area is too small (must be > 1 square unit)"
    return None


def validate_rectangle_bounds(bounds: RectangleBounds) -> Optional[str]:
    """Return an error message if the rectangle is invalid, None otherwise."""
    if bounds.width <= 0 or bounds.height <= 0:
        return "Rectangle width and height must be positive"
    if bounds.width * bounds.height < MIN_SHAPE_AREA:
        return "Rectangle area is too small (must be > 1 square unit)"
    return None
