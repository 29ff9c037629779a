from __future__ import annotations

import pytest

from texassist.latex.placeholders import clean_placeholders, smart_cursor_offset


@pytest.mark.parametrize(
    ("template", "expected"),
    [
        (r"\frac{a}{b}", r"\frac{}{}"),
        (r"\sqrt{a}", r"\sqrt{}"),
        (r"\sqrt[n]{a}", r"\sqrt[n]{}"),
        (r"\overset{a}{b}", r"\overset{}{}"),
        (r"\xrightarrow{abc}", r"\xrightarrow{}"),
        ("x^{a+b}", "x^{a+b}"),
        (r"\alpha", r"\alpha"),
    ],
)
def test_placeholders_become_empty_groups(template: str, expected: str) -> None:
    assert clean_placeholders(template) == expected


@pytest.mark.parametrize(
    "template",
    [r"\mathbb{R}", r"\mathcal{A}", r"\text{abc}", r"\texttt{a}", r"\textsf{a}"],
)
def test_font_command_arguments_are_kept(template: str) -> None:
    assert clean_placeholders(template) == template


def test_font_heuristic_is_a_substring_check() -> None:
    # \textcircled contains \text, so its placeholder survives.
    assert clean_placeholders(r"\textcircled{a}") == r"\textcircled{a}"
    # A font command anywhere earlier protects later placeholders too.
    assert clean_placeholders(r"\hat{y}+\mathbf{x}") == r"\hat{}+\mathbf{x}"
    assert clean_placeholders(r"\mathbf{x}+\hat{y}") == r"\mathbf{x}+\hat{y}"


def test_environment_names_are_treated_as_placeholders() -> None:
    assert clean_placeholders(r"\begin{pmatrix}\end{pmatrix}") == r"\begin{}\end{}"


def test_custom_allow_list() -> None:
    assert clean_placeholders(r"\operatorname{f}", (r"\operatorname",)) == r"\operatorname{f}"
    assert clean_placeholders(r"\mathbb{R}", ()) == r"\mathbb{}"


@pytest.mark.parametrize(
    ("cleaned", "expected"),
    [
        (r"\frac{}{}", 6),
        (r"\overset{}{}", 9),
        (r"\sqrt{}", 6),
        (r"\sqrt[n]{}", 9),
        (r"\left(\right)", 6),
        (r"\left[\right]", 6),
        (r"\left\{\right\}", 7),
        (r"\alpha", None),
        (r"\left|\right|", None),
        (r"\begin{}\end{}", None),
        (r"\mathbb{R}", None),
        ("", None),
    ],
)
def test_smart_cursor_offset(cleaned: str, expected: int | None) -> None:
    assert smart_cursor_offset(cleaned) == expected


def test_double_pair_wins_over_single_pair() -> None:
    cleaned = r"\sqrt{}+\frac{}{}"

    assert smart_cursor_offset(cleaned) == cleaned.find("{}{}") + 1
