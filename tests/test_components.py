from starforge.components import (
    CollisionBox,
    Controllable,
    Drawable,
    EnemyKind,
    EnemyType,
    ToDelete,
    Transform,
    Unmovable,
    Velocity,
)


def test_transform_str_lists_three_rows():
    transform = Transform(1, 2.5, 3, 0, 0, 90, 3, 3, 3)
    assert str(transform) == (
        "pos: { 1, 2.5, 3 }\n"
        "rot: { 0, 0, 90 }\n"
        "scale: { 3, 3, 3 }\n"
    )


def test_velocity_str():
    velocity = Velocity(-120, 60, 0)
    assert str(velocity) == "vel: { -120, 60, 0 }\n"


def test_collision_box_str():
    box = CollisionBox(99, 51.5, 0)
    assert str(box) == "colision box: { 99, 51.5, 0 }\n"


def test_to_delete_defaults_to_true():
    assert ToDelete().to_delete is True


def test_flag_components_keep_values():
    assert Drawable(True).is_drawable is True
    assert Controllable(True).is_controllable is True
    assert Unmovable(True).is_unmovable is True


def test_enemy_kind_order_matches_wire_values():
    assert [kind.value for kind in EnemyKind] == [0, 1, 2, 3, 4]
    assert EnemyKind(4) is EnemyKind.BOSS


def test_enemy_type_default_and_equality():
    assert EnemyType().kind is EnemyKind.SIMPLE
    assert EnemyType(EnemyKind.MECHA) == EnemyType(EnemyKind.MECHA)


def test_components_are_mutable_in_place():
    transform = Transform()
    velocity = Velocity(10, -5, 0)
    transform.pos_x += velocity.vel_x
    transform.pos_y += velocity.vel_y
    assert (transform.pos_x, transform.pos_y) == (10, -5)
    assert transform == Transform(pos_x=10, pos_y=-5)