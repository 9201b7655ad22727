import pytest

from dadops.tree import branch, draw


def test_leaf_stem_commands():
    assert list(branch(5, 0.7, 30, 0)) == [
        "color black",
        "width 5.000000",
        "forward 5.000000",
        "color off",
        "left 180",
        "forward 5.000000",
        "left 180",
    ]


@pytest.mark.parametrize("iterations", [0, 1, 2, 3])
def test_colors_are_balanced(iterations):
    lines = list(branch(5, 0.7, 30, iterations))
    assert lines.count("color black") == lines.count("color off")
    assert lines.count("left 180") == 2 * lines.count("color black")


def test_each_level_doubles_the_stems():
    one = list(branch(5, 0.7, 30, 1)).count("color black")
    two = list(branch(5, 0.7, 30, 2)).count("color black")
    assert two == 2 * one + 1


def test_turns_left_and_right_balance():
    lines = list(branch(4, 0.5, 45, 2))
    lefts = [line for line in lines if line.startswith("left ") and line != "left 180"]
    rights = [line for line in lines if line.startswith("right ")]
    assert len(lefts) == 2 * len(rights)


def test_draw_prints_and_returns_lines(capsys):
    lines = draw(5, 0.7, 30, 1)
    assert lines[0] == "draw mode"
    assert lines[1:] == list(branch(5, 0.7, 30, 1))
    assert capsys.readouterr().out == "".join(f"{line}\n" for line in lines)