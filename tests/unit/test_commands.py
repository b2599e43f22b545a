"""Unit tests for command and query validation."""

import pytest

from articles_api.domain.entities import ArticleQuery, CreateArticleCommand
from articles_api.domain.exceptions import ArticlesError, StoreError, ValidationError


def test_valid_command_passes():
    CreateArticleCommand(author="a", title="t", body="b").validate()


def test_first_missing_field_is_reported():
    with pytest.raises(ValidationError, match="^title is required$"):
        CreateArticleCommand(author="a", title="", body="").validate()


def test_whitespace_is_not_trimmed():
    # Only the empty string is invalid
    CreateArticleCommand(author=" ", title=" ", body=" ").validate()


def test_query_always_valid():
    ArticleQuery().validate()
    ArticleQuery(query="%", author="").validate()


def test_error_status_codes():
    assert ValidationError("author").status_code == 400
    assert StoreError("create article").status_code == 500
    assert isinstance(StoreError("create article"), ArticlesError)
