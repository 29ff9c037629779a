"""Built-in symbol catalog.

Order matters: autocomplete ranks matches by declaration order, so the
more common symbols are declared first.
"""

from __future__ import annotations

from texassist.catalog.models import Category, SymbolEntry
from texassist.catalog.registry import SymbolCatalog, load_catalog
from texassist.core.settings import EditorSettings


def _entries(
    group: str,
    rows: list[tuple[str, str]],
    category: Category = Category.LATEX,
) -> list[SymbolEntry]:
    return [
        SymbolEntry(text=text, description=description, category=category, group=group)
        for text, description in rows
    ]


BASIC_OPERATORS = _entries(
    "basic-operators",
    [
        ("+", "plus"),
        ("-", "minus"),
        (r"\times", "multiplication"),
        (r"\div", "division"),
        ("=", "equals"),
        (r"\neq", "not equal"),
        ("<", "less than"),
        (">", "greater than"),
        (r"\leq", "less than or equal"),
        (r"\geq", "greater than or equal"),
        (r"\approx", "approximately"),
        (r"\pm", "plus-minus"),
        (r"\mp", "minus-plus"),
        (r"\propto", "proportional to"),
    ],
)

GREEK_LETTERS = _entries(
    "greek-letters",
    [
        (r"\alpha", "alpha"),
        (r"\beta", "beta"),
        (r"\gamma", "gamma"),
        (r"\delta", "delta"),
        (r"\epsilon", "epsilon"),
        (r"\varepsilon", "varepsilon"),
        (r"\zeta", "zeta"),
        (r"\eta", "eta"),
        (r"\theta", "theta"),
        (r"\vartheta", "vartheta"),
        (r"\iota", "iota"),
        (r"\kappa", "kappa"),
        (r"\lambda", "lambda"),
        (r"\mu", "mu"),
        (r"\nu", "nu"),
        (r"\xi", "xi"),
        (r"\pi", "pi"),
        (r"\rho", "rho"),
        (r"\sigma", "sigma"),
        (r"\tau", "tau"),
        (r"\upsilon", "upsilon"),
        (r"\phi", "phi"),
        (r"\varphi", "varphi"),
        (r"\chi", "chi"),
        (r"\psi", "psi"),
        (r"\omega", "omega"),
        (r"\Alpha", "Alpha"),
        (r"\Beta", "Beta"),
        (r"\Gamma", "Gamma"),
        (r"\Delta", "Delta"),
        (r"\Theta", "Theta"),
        (r"\Lambda", "Lambda"),
        (r"\Xi", "Xi"),
        (r"\Pi", "Pi"),
        (r"\Sigma", "Sigma"),
        (r"\Phi", "Phi"),
        (r"\Psi", "Psi"),
        (r"\Omega", "Omega"),
    ],
)

MATH_FUNCTIONS = _entries(
    "math-functions",
    [
        (r"\sin", "sine"),
        (r"\cos", "cosine"),
        (r"\tan", "tangent"),
        (r"\cot", "cotangent"),
        (r"\sec", "secant"),
        (r"\csc", "cosecant"),
        (r"\arcsin", "arcsine"),
        (r"\arccos", "arccosine"),
        (r"\arctan", "arctangent"),
        (r"\log", "logarithm"),
        (r"\ln", "natural logarithm"),
        (r"\lg", "common logarithm"),
        (r"\exp", "exponential"),
        (r"\lim", "limit"),
        (r"\sum", "summation"),
        (r"\int", "integral"),
        (r"\iint", "double integral"),
        (r"\iiint", "triple integral"),
        (r"\oint", "contour integral"),
        (r"\prod", "product"),
        (r"\coprod", "coproduct"),
        (r"\max", "maximum"),
        (r"\min", "minimum"),
        (r"\inf", "infimum"),
        (r"\sup", "supremum"),
    ],
)

FRACTIONS_AND_ROOTS = _entries(
    "fractions-roots",
    [
        (r"\frac{a}{b}", "fraction"),
        (r"\dfrac{a}{b}", "display fraction"),
        (r"\tfrac{a}{b}", "text fraction"),
        (r"\sqrt{a}", "square root"),
        (r"\sqrt[n]{a}", "n-th root"),
    ],
)

SUBSCRIPTS_AND_BRACKETS = _entries(
    "subscripts-brackets",
    [
        ("x^2", "superscript"),
        ("x_2", "subscript"),
        ("x^{a+b}", "compound superscript"),
        ("x_{a+b}", "compound subscript"),
        (r"\left(\right)", "auto-sized parentheses"),
        (r"\left[\right]", "auto-sized brackets"),
        (r"\left\{\right\}", "auto-sized braces"),
        (r"\left|\right|", "absolute value"),
    ],
)

SETS_AND_LOGIC = _entries(
    "sets-logic",
    [
        (r"\in", "element of"),
        (r"\notin", "not an element of"),
        (r"\subset", "proper subset"),
        (r"\subseteq", "subset"),
        (r"\supset", "proper superset"),
        (r"\supseteq", "superset"),
        (r"\cup", "union"),
        (r"\cap", "intersection"),
        (r"\emptyset", "empty set"),
        (r"\mathbb{R}", "real numbers"),
        (r"\mathbb{Z}", "integers"),
        (r"\mathbb{N}", "natural numbers"),
        (r"\mathbb{Q}", "rational numbers"),
        (r"\mathbb{C}", "complex numbers"),
    ],
)

ARROWS_AND_RELATIONS = _entries(
    "arrows-relations",
    [
        (r"\rightarrow", "right arrow"),
        (r"\leftarrow", "left arrow"),
        (r"\leftrightarrow", "left-right arrow"),
        (r"\Rightarrow", "implies"),
        (r"\Leftarrow", "implied by"),
        (r"\Leftrightarrow", "if and only if"),
        (r"\to", "maps to (arrow)"),
        (r"\mapsto", "maps to"),
    ],
)

SPECIAL_SYMBOLS = _entries(
    "special-symbols",
    [
        (r"\infty", "infinity"),
        (r"\partial", "partial derivative"),
        (r"\nabla", "nabla"),
        (r"\triangle", "triangle"),
        (r"\angle", "angle"),
        (r"\degree", "degree"),
        (r"\prime", "prime"),
        (r"\prime\prime", "double prime"),
        (r"\ldots", "low ellipsis"),
        (r"\cdots", "centered ellipsis"),
        (r"\vdots", "vertical ellipsis"),
        (r"\ddots", "diagonal ellipsis"),
        (r"\square", "square"),
        (r"\odot", "circled dot"),
        (r"\diamond", "diamond"),
        (r"\star", "star"),
        (r"\bullet", "bullet"),
        (r"\circ", "circle"),
        (r"\bigcirc", "big circle"),
        (r"\bigtriangleup", "big triangle"),
        (r"\bigtriangledown", "big inverted triangle"),
        (r"\lozenge", "lozenge"),
        (r"\displaystyle", "display style"),
    ],
)

FONT_STYLES = _entries(
    "font-styles",
    [
        (r"\mathbf{a}", "bold"),
        (r"\mathit{a}", "italic"),
        (r"\mathrm{a}", "roman"),
        (r"\mathcal{A}", "calligraphic"),
        (r"\mathscr{A}", "script"),
        (r"\mathfrak{a}", "fraktur"),
        (r"\mathbb{A}", "blackboard bold"),
        (r"\text{a}", "text"),
        (r"\texttt{a}", "monospace"),
        (r"\textsf{a}", "sans serif"),
    ],
)

MATH_DECORATIONS = _entries(
    "math-decorations",
    [
        (r"\textcircled{a}", "circled"),
        (r"\hat{a}", "hat"),
        (r"\bar{a}", "bar"),
        (r"\vec{a}", "vector"),
        (r"\dot{a}", "dot"),
        (r"\ddot{a}", "double dot"),
        (r"\tilde{a}", "tilde"),
        (r"\widetilde{a}", "wide tilde"),
        (r"\widehat{a}", "wide hat"),
        (r"\overline{a}", "overline"),
        (r"\underline{a}", "underline"),
        (r"\overbrace{a}", "overbrace"),
        (r"\underbrace{a}", "underbrace"),
        (r"\overset{a}{b}", "overset"),
        (r"\underset{a}{b}", "underset"),
    ],
)

MATRIX_ENVIRONMENTS = _entries(
    "matrix-environments",
    [
        (r"\begin{pmatrix}\end{pmatrix}", "parenthesized matrix"),
        (r"\begin{bmatrix}\end{bmatrix}", "bracketed matrix"),
        (r"\begin{vmatrix}\end{vmatrix}", "determinant"),
        (r"\begin{Vmatrix}\end{Vmatrix}", "norm"),
    ],
)

ALIGN_ENVIRONMENTS = _entries(
    "align-environments",
    [
        (r"\begin{aligned}\end{aligned}", "aligned"),
        (r"\begin{cases}\end{cases}", "cases"),
    ],
)

OTHER_COMMANDS = _entries(
    "other-commands",
    [
        (r"\xrightarrow{a}", "labelled right arrow"),
        (r"\xleftarrow{a}", "labelled left arrow"),
        (r"\xleftrightarrow{a}", "labelled left-right arrow"),
    ],
)

QUESTION_SYMBOLS = (
    _entries("choice", [(r"\choice", "choice question options")], Category.QUESTION)
    + _entries("fill", [(r"\fill", "fill-in blank")], Category.QUESTION)
    + _entries("subp", [(r"\subp", "sub-question")], Category.QUESTION)
    + _entries("subsubp", [(r"\subsubp", "nested sub-question")], Category.QUESTION)
)

BUILTIN_ENTRIES: tuple[SymbolEntry, ...] = tuple(
    BASIC_OPERATORS
    + GREEK_LETTERS
    + MATH_FUNCTIONS
    + FRACTIONS_AND_ROOTS
    + SUBSCRIPTS_AND_BRACKETS
    + SETS_AND_LOGIC
    + ARROWS_AND_RELATIONS
    + SPECIAL_SYMBOLS
    + FONT_STYLES
    + MATH_DECORATIONS
    + MATRIX_ENVIRONMENTS
    + ALIGN_ENVIRONMENTS
    + OTHER_COMMANDS
    + QUESTION_SYMBOLS
)

DEFAULT_CATALOG = SymbolCatalog(BUILTIN_ENTRIES)


def catalog_for_settings(settings: EditorSettings) -> SymbolCatalog:
    """Return the configured catalog, falling back to the built-in one."""

    if settings.catalog_path:
        return load_catalog(settings.catalog_path)
    return DEFAULT_CATALOG
