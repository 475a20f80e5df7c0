from crow.stylesheet.parser import StylesheetParser, parse_stylesheet
from crow.stylesheet.model import (
    Color,
    Declaration,
    Keyword,
    Length,
    Rule,
    Selector,
    SimpleSelector,
    Stylesheet,
    Unit,
    Value,
    to_px,
)
from crow.stylesheet.specificity import Specificity, sort_selectors, specificity

__all__ = [
    "parse_stylesheet",
    "StylesheetParser",
    # model
    "Stylesheet",
    "Rule",
    "Selector",
    "SimpleSelector",
    "Declaration",
    "Value",
    "Keyword",
    "Length",
    "Color",
    "Unit",
    "to_px",
    # specificity
    "Specificity",
    "specificity",
    "sort_selectors",
]
