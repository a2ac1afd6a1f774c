"""
Edit-descriptor assembly from tokenized arguments.

Turns the values captured in an ArgumentMultimap into an
EditPersonDescriptor, validating each supplied field on the way.
"""

from typing import Iterable, Mapping

from talentbook.core.types import PrefixValues
from talentbook.exceptions import FieldKind
from talentbook.model.descriptor import EditPersonDescriptor, EditPersonDescriptorBuilder
from talentbook.model.fields import Tag
from talentbook.parsing.parser_util import FIELD_VALIDATORS, FieldValidator, parse_tags
from talentbook.parsing.prefix import DEFAULT_SYNTAX, CliSyntax
from talentbook.parsing.tokenizer import ArgumentMultimap


def parse_tags_for_edit(tags: PrefixValues) -> frozenset[Tag] | None:
    """
    Parse the raw values of the tag prefix for an edit.

    Returns None when the prefix was absent. A single empty value means
    "clear all tags" and yields an empty set; anything else is validated
    as a set of tags.

    Raises:
        ConstraintViolationError: If any value is not a valid tag, including
            an empty value mixed with other tag values
    """
    if not tags:
        return None
    if len(tags) == 1 and tags[0] == "":
        return frozenset()
    return parse_tags(tags)


def build_edit_descriptor(
    arg_multimap: ArgumentMultimap,
    fields: Iterable[FieldKind],
    syntax: CliSyntax = DEFAULT_SYNTAX,
    validators: Mapping[FieldKind, FieldValidator] = FIELD_VALIDATORS,
) -> EditPersonDescriptor:
    """
    Validate the supplied fields and collect them into a descriptor.

    Fields are validated in the order given and the first invalid value
    aborts the build. Absent fields leave their slot empty. Callers decide
    whether an empty descriptor is acceptable.

    Params:
        arg_multimap: Tokenized arguments, already checked for duplicates
        fields: Field kinds the command accepts
        syntax: Prefix registry used to look up each field
        validators: Parse function per field kind

    Returns:
        The frozen EditPersonDescriptor

    Raises:
        ConstraintViolationError: For the first field whose value is invalid
    """
    builder = EditPersonDescriptorBuilder()
    for kind in fields:
        prefix = syntax.for_field(kind)
        if kind is FieldKind.TAG:
            tags = parse_tags_for_edit(arg_multimap.get_all_values(prefix))
            if tags is not None:
                builder.set_tags(tags)
            continue

        value = arg_multimap.get_value(prefix)
        if value is not None:
            builder.set_field(kind, validators[kind].parse(value))
    return builder.build()
