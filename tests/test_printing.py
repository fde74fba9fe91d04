import io

from binarytrees.nodes import binary_tree_node, insert_left, insert_right
from binarytrees.printing import format_tree, print_tree


def build_sample():
    root = binary_tree_node(None, 98)
    root.left = binary_tree_node(root, 12)
    root.left.left = binary_tree_node(root.left, 6)
    root.left.right = binary_tree_node(root.left, 16)
    root.right = binary_tree_node(root, 402)
    root.right.left = binary_tree_node(root.right, 256)
    root.right.right = binary_tree_node(root.right, 512)
    return root


def test_format_full_tree_worked_example():
    expected = (
        "       .-------(098)-------.\n"
        "  .--(012)--.         .--(402)--.\n"
        "(006)     (016)     (256)     (512)\n"
    )
    assert format_tree(build_sample()) == expected


def test_format_two_children_worked_example():
    root = binary_tree_node(None, 98)
    root.left = binary_tree_node(root, 12)
    root.right = binary_tree_node(root, 402)
    expected = "  .--(098)--.\n(012)     (402)\n"
    assert format_tree(root) == expected


def test_format_single_node():
    assert format_tree(binary_tree_node(None, 7)) == "(007)\n"


def test_format_none_is_empty():
    assert format_tree(None) == ""


def test_every_value_is_drawn_once():
    text = format_tree(build_sample())
    for value in (98, 12, 6, 16, 402, 256, 512):
        assert text.count(f"({value:03d})") == 1


def test_print_tree_writes_formatted_text():
    root = build_sample()
    buffer = io.StringIO()
    print_tree(root, buffer)
    assert buffer.getvalue() == format_tree(root)


def test_print_tree_defaults_to_stdout(capsys):
    root = build_sample()
    print_tree(root)
    assert capsys.readouterr().out == format_tree(root)


def test_print_none_writes_nothing():
    buffer = io.StringIO()
    print_tree(None, buffer)
    assert buffer.getvalue() == ""