import random

import pytest
from pytest import approx

from bintree.tree import BinaryTree
from bintree.visualization import (
    DrawingSink,
    LayoutConfig,
    build_tree_scene,
    compute_tree_layout,
    child_offset,
    layout_scale,
    render_tree,
)


def _perfect(h):
    return BinaryTree([None, *range(1, 2 ** h)])


def _zigzag(h):
    tree = BinaryTree.from_subtrees(h)
    for level in range(h - 1, 0, -1):
        if level % 2:
            tree = BinaryTree.from_subtrees(level, left=tree)
        else:
            tree = BinaryTree.from_subtrees(level, right=tree)
    return tree


def _random_shape(h, rng):
    """Random tree of exactly height ``h`` (one spine is always kept)."""

    if h == 0:
        return None
    spine_left = rng.random() < 0.5
    keep_left = spine_left or rng.random() < 0.6
    keep_right = not spine_left or rng.random() < 0.6
    left = right = None
    if keep_left:
        left = _random_shape(h - 1 if spine_left else rng.randint(0, h - 1), rng)
    if keep_right:
        right = _random_shape(h - 1 if not spine_left else rng.randint(0, h - 1), rng)
    return BinaryTree.from_subtrees(rng.randint(0, 99), left, right)


def _shapes(h):
    rng = random.Random(h)
    shapes = [_perfect(h), BinaryTree([None, *range(1, 2 ** (h - 1) + 1)]), _zigzag(h)]
    shapes.extend(_random_shape(h, rng) for _ in range(5))
    return shapes


def _subtree_extent(positions, index):
    xs = []
    stack = [index]
    while stack:
        current = stack.pop()
        if current not in positions:
            continue
        xs.append(positions[current][0])
        stack.extend((2 * current, 2 * current + 1))
    return min(xs), max(xs)


def test_layout_scale():
    assert [layout_scale(h) for h in range(4)] == [1.0, 1.0, 1.0, 1.0]
    assert layout_scale(4) == approx(1.0)
    assert layout_scale(5) == approx(0.5)
    assert layout_scale(6) == approx(0.25)


def test_small_tree_positions(small_tree):
    positions = compute_tree_layout(small_tree)

    assert positions[1] == approx((0.0, 0.0))
    assert positions[2] == approx((-30.0, -90.0))
    assert positions[3] == approx((30.0, -90.0))


def test_layout_honours_origin_and_config(small_tree):
    config = LayoutConfig(node_separation=10.0, level_separation=40.0)
    positions = compute_tree_layout(small_tree, origin=(100.0, 50.0), config=config)

    assert positions[2] == approx((90.0, 10.0))
    assert positions[3] == approx((110.0, 10.0))


def test_layout_of_empty_tree():
    assert compute_tree_layout(BinaryTree()) == {}


@pytest.mark.parametrize("h", range(1, 7))
def test_sibling_subtrees_do_not_overlap(h):
    for tree in _shapes(h):
        assert tree.height() == h
        positions = compute_tree_layout(tree)
        assert len(positions) == tree.node_count()
        for index in positions:
            left, right = 2 * index, 2 * index + 1
            if left in positions and right in positions:
                _, left_max = _subtree_extent(positions, left)
                right_min, _ = _subtree_extent(positions, right)
                assert left_max < right_min


@pytest.mark.parametrize("h", range(1, 7))
def test_children_sit_one_level_below(h):
    tree = _perfect(h)
    scale = layout_scale(h)
    positions = compute_tree_layout(tree)
    for index, (x, y) in positions.items():
        for child in (2 * index, 2 * index + 1):
            if child in positions:
                assert positions[child][1] == approx(y - 90.0 * scale)
        if 2 * index in positions:
            assert positions[2 * index][0] < x < positions[2 * index + 1][0]


def test_recording_sink_satisfies_protocol(recording_sink):
    assert isinstance(recording_sink, DrawingSink)


def test_render_small_tree_call_sequence(small_tree, recording_sink):
    render_tree(small_tree, recording_sink, "three nodes")

    assert recording_sink.calls == [
        ("begin_page", ("three nodes",)),
        ("select_font", ("Helvetica", 20.0)),
        ("set_fill_color", (0.75,)),
        ("set_line_width", (1.0,)),
        ("move_to", (306.0, 720.0)),
        ("line_to", (276.0, 630.0)),
        ("stroke", ()),
        ("draw_text_box", ("1", 276.0, 630.0, 6.0, 6.0, 0, 20.0)),
        ("move_to", (306.0, 720.0)),
        ("line_to", (336.0, 630.0)),
        ("stroke", ()),
        ("draw_text_box", ("3", 336.0, 630.0, 6.0, 6.0, 0, 20.0)),
        ("draw_text_box", ("2", 306.0, 720.0, 6.0, 6.0, 0, 20.0)),
    ]


def test_render_draws_edges_before_boxes(lopsided_tree, recording_sink):
    render_tree(lopsided_tree, recording_sink)
    calls = recording_sink.calls

    boxes = {
        args[1:3]: position
        for position, (name, args) in enumerate(calls)
        if name == "draw_text_box"
    }
    assert len(boxes) == lopsided_tree.node_count()

    for position, (name, args) in enumerate(calls):
        if name == "move_to":
            # the edge leaves its parent before the parent's box is drawn
            assert position < boxes[args]
        if name == "line_to":
            # and reaches its child before the child's box is drawn
            assert position < boxes[args]


def test_render_matches_layout(lopsided_tree, recording_sink):
    render_tree(lopsided_tree, recording_sink)
    positions = compute_tree_layout(lopsided_tree, origin=(306.0, 720.0))

    drawn = sorted(args[1:3] for name, args in recording_sink.calls if name == "draw_text_box")
    assert drawn == sorted(positions.values())


def test_render_empty_tree(recording_sink):
    render_tree(BinaryTree(), recording_sink)
    assert recording_sink.names() == [
        "begin_page",
        "select_font",
        "set_fill_color",
        "set_line_width",
    ]


def test_render_single_node(recording_sink):
    render_tree(BinaryTree([None, "only"]), recording_sink)
    names = recording_sink.names()
    assert "stroke" not in names
    assert names.count("draw_text_box") == 1


def test_render_scales_tall_trees(recording_sink):
    render_tree(_perfect(5), recording_sink)
    calls = dict(recording_sink.calls[:4])

    assert calls["select_font"] == ("Helvetica", approx(10.0))
    assert calls["set_line_width"] == (approx(0.5),)
    box = next(args for name, args in recording_sink.calls if name == "draw_text_box")
    assert box[3:] == approx((3.0, 3.0, 0, 10.0))


def test_build_tree_scene(lopsided_tree):
    scene = build_tree_scene(lopsided_tree)

    assert [node.index for node in scene.nodes] == [1, 2, 5, 10, 3, 7]
    assert [node.label for node in scene.nodes] == ["a", "b", "d", "f", "c", "e"]
    assert {(edge.parent, edge.child, edge.side) for edge in scene.edges} == {
        (1, 2, "left"),
        (1, 3, "right"),
        (2, 5, "right"),
        (5, 10, "left"),
        (3, 7, "right"),
    }
    depths = {node.label: node.depth for node in scene.nodes}
    assert depths == {"a": 0, "b": 1, "c": 1, "d": 2, "e": 2, "f": 3}
    assert scene.metadata == {"height": 4, "node_count": 6, "scale": approx(1.0)}

    min_x, min_y, max_x, max_y = scene.bounds()
    assert max_y == approx(0.0)
    assert min_y == approx(-270.0)
    assert min_x == approx(-120.0)
    assert max_x == approx(180.0)


def test_empty_scene_bounds():
    scene = build_tree_scene(BinaryTree())
    assert scene.nodes == [] and scene.edges == []
    assert scene.bounds() == (0.0, 0.0, 0.0, 0.0)
    assert scene.positions_array().shape == (0, 2)


def test_child_offset_halves_per_level():
    assert child_offset(3, 1.0) == approx((120.0, 90.0))
    assert child_offset(0, 0.5) == approx((7.5, 45.0))


def test_child_offset_rejects_negative_leaf_distance():
    with pytest.raises(ValueError, match="leaf_dist"):
        child_offset(-1, 1.0)
