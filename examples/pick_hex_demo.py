from hexcoord import (
    Layout,
    OrientationType,
    Parity,
    Point,
    hex_corners,
    hex_distance,
    pixel_to_hex,
)

layout = Layout(OrientationType.POINTY, size=Point(24.0, 24.0), origin=Point(320.0, 240.0), parity=Parity.ODD)
clicks = [Point(320.0, 240.0), Point(371.0, 198.0), Point(250.0, 330.0)]


if __name__ == "__main__":
    first = pixel_to_hex(layout, clicks[0])
    for click in clicks:
        h = pixel_to_hex(layout, click)
        print("click:", (click.x, click.y))
        print("  hex:", (h.q, h.r, h.s), "offset:", layout.hex_to_offset(h))
        print("  distance from first:", hex_distance(first, h))
        print("  corners:", [(round(c.x, 1), round(c.y, 1)) for c in hex_corners(layout, h)])
