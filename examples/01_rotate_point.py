"""
Example 01: Rotating and Translating a Point

Demonstrates:
1. Building a rotor about a center point and a motor.
2. Applying both to a point through the sandwich product.
3. Chaining them into a single MultiTransform.
4. Joining two points into a line and reflecting a point across it.
"""

from pga2d.pga import (
    Motor,
    MultiTransform,
    Point2d,
    Rotor,
    line_between_points,
    reflect,
)
from pga2d.utils import Angle


# =============================================================================
# 1. Single Transformations
# =============================================================================

def single_transforms(center: Point2d, target: Point2d):
    angle = Angle.from_degrees(45.0)
    rotor = Rotor(center, angle)
    motor = Motor(1.0, 2.0, 2.0)

    rotated = rotor.apply(target.to_bivector())
    displaced = motor.apply(target.to_bivector())

    print(f"  rotated = {rotated} | {Point2d.from_bivector(rotated)}")
    print(f"  displaced = {displaced} | {Point2d.from_bivector(displaced)}")
    return rotor, motor


# =============================================================================
# 2. Composition
# =============================================================================

def composed(rotor: Rotor, motor: Motor, target: Point2d):
    rotate_then_move = MultiTransform([rotor, motor])
    move_then_rotate = MultiTransform([motor, rotor])

    print(f"  rotate, then move: {rotate_then_move.apply(target)}")
    print(f"  move, then rotate: {move_then_rotate.apply(target)}")
    print(f"  round trip: {rotate_then_move.inverse().apply(rotate_then_move.apply(target))}")


# =============================================================================
# 3. Join and Reflection
# =============================================================================

def mirror(a: Point2d, b: Point2d, target: Point2d):
    mirror_line = line_between_points(a, b).normalized()
    reflected = reflect(target.to_bivector(), mirror_line)
    print(f"  line through {a} and {b}: {mirror_line}")
    print(f"  reflection of {target}: {Point2d.from_bivector(reflected)}")


def main():
    print("=" * 70)
    print("Rotating and Translating a Point")
    print("=" * 70)

    center = Point2d(2.0, 0.0)
    target = Point2d(2.0, 4.0)
    print(f"\nCenter: {center}")
    print(f"Target: {target}")

    print("\n[1/3] Rotor and motor...")
    rotor, motor = single_transforms(center, target)

    print("\n[2/3] Composition...")
    composed(rotor, motor, target)

    print("\n[3/3] Join and reflection...")
    mirror(Point2d(0.0, 0.0), Point2d(1.0, 1.0), target)


if __name__ == "__main__":
    main()
