"""Unit tests for mdlc.api.link.slugify."""

import pytest

from mdlc.api.link.slugify import slugify, unique_slugs

pytestmark = pytest.mark.link


@pytest.mark.parametrize(
    ("heading", "expected"),
    [
        ("Hello World", "hello-world"),
        ("My Section!", "my-section"),
        ("API: `get_x()` v2.0", "api-get_x-v20"),
        ("[Link](http://x.example) text", "link-text"),
        ("![icon](i.png) Icons", "icon-icons"),
        ("  Spaced   out  ", "spaced-out"),
        ("Ünïcode Héading", "ünïcode-héading"),
        ("pre-existing - dash", "pre-existing---dash"),
        ("<em>Tagged</em> heading", "tagged-heading"),
        ("???", ""),
    ],
)
def test_slugify(heading, expected):
    assert slugify(heading) == expected


def test_unique_slugs_numbers_repeats_in_order():
    assert unique_slugs(["a", "a", "b", "a"]) == ["a", "a-1", "b", "a-2"]


def test_unique_slugs_skips_suffixes_already_taken():
    assert unique_slugs(["a-1", "a", "a"]) == ["a-1", "a", "a-2"]
