"""
talentbook argument parsing engine.

This package provides the prefix registry, the argument tokenizer, the
per-field validators and the edit-descriptor builder shared by every
command parser.
"""

from talentbook.parsing.descriptor_builder import build_edit_descriptor, parse_tags_for_edit
from talentbook.parsing.parser_util import (
    FIELD_VALIDATORS,
    FieldValidator,
    parse_address,
    parse_date,
    parse_email,
    parse_index,
    parse_name,
    parse_phone,
    parse_tag,
    parse_tags,
    validators_for,
)
from talentbook.parsing.prefix import (
    DEFAULT_SYNTAX,
    PREFIX_ADDRESS,
    PREFIX_DATE,
    PREFIX_EMAIL,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_TAG,
    CliSyntax,
    Prefix,
)
from talentbook.parsing.settings import DEFAULT_SETTINGS, ParserSettings
from talentbook.parsing.tokenizer import ArgumentMultimap, tokenize

__all__ = [
    "ArgumentMultimap",
    "CliSyntax",
    "DEFAULT_SETTINGS",
    "DEFAULT_SYNTAX",
    "FIELD_VALIDATORS",
    "FieldValidator",
    "ParserSettings",
    "Prefix",
    "PREFIX_ADDRESS",
    "PREFIX_DATE",
    "PREFIX_EMAIL",
    "PREFIX_NAME",
    "PREFIX_PHONE",
    "PREFIX_TAG",
    "build_edit_descriptor",
    "parse_address",
    "parse_date",
    "parse_email",
    "parse_index",
    "parse_name",
    "parse_phone",
    "parse_tag",
    "parse_tags",
    "parse_tags_for_edit",
    "tokenize",
    "validators_for",
]
