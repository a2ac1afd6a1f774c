"""
Shared test fixtures for the talentbook test suite.
"""

import pytest

from talentbook.commands import (
    AddCommandParser,
    DeleteCommandParser,
    EditCommandParser,
    TagCommandParser,
)


@pytest.fixture
def edit_parser():
    return EditCommandParser()


@pytest.fixture
def tag_parser():
    return TagCommandParser()


@pytest.fixture
def add_parser():
    return AddCommandParser()


@pytest.fixture
def delete_parser():
    return DeleteCommandParser()
