"""
The built-in CSS/HTML rule catalog.

Rules are (name, template) pairs. A template may reference earlier or
later rules with ``{Name}``; the processor works out the build order.

WARNING: CssBlocks is not recursive and will also match the blocks inside
at-rules. CssAtRules only takes one level of inner blocks and its leading
``@.*`` is greedy, so consecutive at-rules come back as a single match.
"""

CSS_NUMBER = "CssNumber"
CSS_PERCENTAGE = "CssPercentage"
CSS_LENGTH = "CssLength"
CSS_COLORS = "CssColors"
CSS_LINE_HEIGHT = "CssLineHeight"
CSS_BORDER_STYLE = "CssBorderStyle"
CSS_BORDER_WIDTH = "CssBorderWidth"
CSS_FONT_FAMILY = "CssFontFamily"
CSS_FONT_STYLE = "CssFontStyle"
CSS_FONT_VARIANT = "CssFontVariant"
CSS_FONT_WEIGHT = "CssFontWeight"
CSS_FONT_SIZE = "CssFontSize"
CSS_FONT_SIZE_AND_LINE_HEIGHT = "CssFontSizeAndLineHeight"
CSS_PROPERTIES = "CssProperties"
CSS_COMMENTS = "CssComments"
CSS_BLOCKS = "CssBlocks"
CSS_AT_RULES = "CssAtRules"
CSS_MEDIA_TYPES = "CssMediaTypes"
HTML_TAG = "HtmlTag"
HTML_TAG_ATTRIBUTES = "HtmlTagAttributes"

LENGTH_UNITS = ("em", "ex", "px", "in", "cm", "mm", "pt", "pc")

NAMED_COLORS = (
    "maroon", "red", "orange", "yellow", "olive", "purple", "fuchsia", "white",
    "lime", "green", "navy", "blue", "aqua", "teal", "black", "silver", "gray",
)

FONT_SIZE_KEYWORDS = (
    "xx-small", "x-small", "small", "medium", "large", "x-large", "xx-large",
    "larger", "smaller",
)

FONT_WEIGHTS = (
    "normal", "bold", "bolder", "lighter",
    "100", "200", "300", "400", "500", "600", "700", "800", "900",
)


def _alternation(*choices: str) -> str:
    return "(" + "|".join(choices) + ")"


_RGB_CHANNEL = r"\s*[0-9]{1,3}%?\s*"
_FAMILY_NAME = r"""("[^"]*"|'[^']*'|\S+)"""


DEFAULT_RULES: tuple[tuple[str, str], ...] = (
    # Values
    (CSS_NUMBER, r"([0-9]*\.[0-9]+|[0-9]+)"),
    (CSS_PERCENTAGE, r"{CssNumber}%"),
    (CSS_LENGTH, r"{CssNumber}" + _alternation(*LENGTH_UNITS)),
    (CSS_COLORS, _alternation(
        r"#\S{6}",
        r"#\S{3}",
        r"rgb\(" + ",".join([_RGB_CHANNEL] * 3) + r"\)",
        *NAMED_COLORS,
    )),

    # Typography
    (CSS_LINE_HEIGHT, r"(normal|{CssLength}|{CssPercentage}|{CssNumber})"),
    (CSS_BORDER_STYLE, _alternation(
        "none", "hidden", "dotted", "dashed", "solid", "double", "groove",
        "ridge", "inset", "outset",
    )),
    (CSS_BORDER_WIDTH, r"({CssLength}|thin|medium|thick)"),
    (CSS_FONT_FAMILY, r"""("[^"]*"|'[^']*'|\S+\s*)(\s*,\s*""" + _FAMILY_NAME + r")*"),
    (CSS_FONT_STYLE, _alternation("normal", "italic", "oblique")),
    (CSS_FONT_VARIANT, _alternation("normal", "small-caps")),
    (CSS_FONT_WEIGHT, _alternation(*FONT_WEIGHTS)),
    (CSS_FONT_SIZE, r"({CssLength}|{CssPercentage}|" + "|".join(FONT_SIZE_KEYWORDS) + ")"),
    # font: ... font-size[/line-height] ...
    (CSS_FONT_SIZE_AND_LINE_HEIGHT, r"{CssFontSize}(/{CssLineHeight})?(\s|$)"),

    # Structure
    (CSS_PROPERTIES, r";?[^;\s]*:[^{}:;]*(}|;)?"),
    (CSS_COMMENTS, r"/\*[^*/]*\*/"),
    (CSS_BLOCKS, r"[^{}]*\{[^{}]*\}"),
    (CSS_AT_RULES, r"@.*\{\s*({CssBlocks})*\s*\}"),
    (CSS_MEDIA_TYPES, r"@media[^{}]*\{"),
    (HTML_TAG, r"<[^<>]*>"),
    (HTML_TAG_ATTRIBUTES, r"""[^\s]*\s*=\s*("[^"]*"|[^\s]*)"""),
)
