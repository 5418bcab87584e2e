"""Tests for assertion contexts."""

import dataclasses

import pytest

from actioncheck import AssertionConfig, AssertionContext, TextContentResult, assert_that


def test_for_action_default_template():
    ctx = AssertionContext.for_action("Download", "FilesController")
    assert ctx.prefix == "When calling Download action in FilesController expected"


def test_for_action_custom_template():
    config = AssertionConfig(prefix_template="{controller}.{action}() expected")
    ctx = AssertionContext.for_action("Index", "HomeController", config=config)
    assert ctx.prefix == "HomeController.Index() expected"


def test_context_is_read_only():
    ctx = AssertionContext(prefix="Expected")
    with pytest.raises(dataclasses.FrozenInstanceError):
        ctx.prefix = "changed"


def test_prefix_starts_every_message():
    ctx = AssertionContext(prefix="In test_home expected")
    with pytest.raises(AssertionError) as exc_info:
        assert_that(TextContentResult("a"), ctx).with_text("b")
    assert str(exc_info.value).startswith("In test_home expected content result content")
