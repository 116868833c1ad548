"""Breeze model layer -- public type re-exports."""

from breeze.model.candidate import Candidate, parse_candidate, split_top_level
from breeze.model.rule import Declaration, Layer, NestedBlock, ResolvedRule, RuleBody
from breeze.model.stylesheet import LAYER_ORDER, Stylesheet
from breeze.model.token import DesignToken

__all__ = [
    # token
    "DesignToken",
    # candidate
    "Candidate",
    "parse_candidate",
    "split_top_level",
    # rule
    "Layer",
    "Declaration",
    "RuleBody",
    "NestedBlock",
    "ResolvedRule",
    # stylesheet
    "LAYER_ORDER",
    "Stylesheet",
]
