from folio.rendering.card_surface import CardSurface


def _fill_triangle(surface):
    surface.begin_path()
    surface.move_to(0, 10)
    surface.line_to(5, 0)
    surface.line_to(10, 10)
    surface.close_path()
    surface.fill()


def test_fill_records_polygon_in_fill_color():
    surface = CardSurface(10, 10)
    surface.set_fill_color((1, 2, 3))
    _fill_triangle(surface)
    shapes = surface.shapes
    assert len(shapes) == 1
    assert shapes[0].color == (1, 2, 3)
    assert shapes[0].points[0] == shapes[0].points[-1]


def test_full_clear_empties_surface():
    surface = CardSurface(10, 10)
    surface.fill_rect(0, 0, 10, 10)
    assert not surface.is_empty
    surface.clear_rect(0, 0, 10, 10)
    assert surface.is_empty


def test_partial_clear_records_erase_shape():
    surface = CardSurface(10, 10)
    surface.fill_rect(0, 0, 10, 10)
    surface.clear_rect(0, 0, 5, 5)
    assert [shape.color for shape in surface.shapes] == [(0, 0, 0), None]


def test_quadratic_curve_is_flattened_through_endpoint():
    surface = CardSurface(10, 10, curve_segments=4)
    surface.begin_path()
    surface.move_to(0, 10)
    surface.quadratic_curve_to(5, 0, 10, 10)
    surface.close_path()
    surface.fill()
    points = surface.shapes[0].points
    # start + 4 curve points + closing point
    assert len(points) == 6
    assert points[4] == (10.0, 10.0)
    # Midpoint of the curve sits halfway to the control point.
    assert points[2] == (5.0, 5.0)


def test_degenerate_shapes_are_skipped():
    surface = CardSurface(0, 0)
    surface.fill_rect(0, 0, 0, 0)
    surface.begin_path()
    surface.move_to(0, 0)
    surface.line_to(0, 0)
    surface.line_to(0, 0)
    surface.close_path()
    surface.fill()
    assert surface.is_empty


def test_begin_path_discards_previous_path():
    surface = CardSurface(10, 10)
    surface.begin_path()
    surface.move_to(0, 0)
    surface.line_to(10, 0)
    surface.line_to(10, 10)
    surface.begin_path()
    surface.fill()
    assert surface.is_empty


def test_resize_clears_painted_shapes():
    surface = CardSurface(10, 10)
    surface.fill_rect(0, 0, 10, 10)
    surface.resize(20, 5)
    assert (surface.width, surface.height) == (20.0, 5.0)
    assert surface.is_empty
