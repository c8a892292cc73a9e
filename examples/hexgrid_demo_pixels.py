from hexlattice.geometry import (
    FLAT,
    Hex,
    Layout,
    Point,
    hex_round,
    hex_to_pixel,
    pixel_to_hex,
    polygon_corners,
)

layout = Layout(FLAT, size=Point(24.0, 24.0), origin=Point(320.0, 240.0))
target = Hex(2, -1, -1)


if __name__ == "__main__":
    centre = hex_to_pixel(layout, target)
    print("centre:", centre)
    print("corners:", polygon_corners(layout, target))

    click = Point(centre.x + 9.0, centre.y - 5.0)
    fractional = pixel_to_hex(layout, click)
    print("fractional:", fractional)
    print("rounded:", hex_round(fractional))
