"""Tests for comma separated list completion."""

from compfilter.listcomp import complete_list

COLORS = "red green blue"


def test_chosen_items_excluded():
    reply = complete_list(COLORS, "red,", max_items=2)
    assert reply.suggestions == ["red,green", "red,blue"]
    assert reply.no_space is False  # second item completes the list


def test_no_comma():
    reply = complete_list(COLORS, "gr")
    assert reply.suggestions == ["green"]
    assert reply.no_space is True


def test_unlimited_always_suppresses_space():
    reply = complete_list(COLORS, "red,green,")
    assert reply.suggestions == ["red,green,blue"]
    assert reply.no_space is True


def test_below_limit_suppresses_space():
    reply = complete_list(COLORS, "", max_items=2)
    assert reply.suggestions == ["red", "green", "blue"]
    assert reply.no_space is True


def test_limit_of_one():
    assert complete_list(COLORS, "b", max_items=1).no_space is False


def test_zero_limit_is_unset():
    assert complete_list(COLORS, "red,", max_items=0).no_space is True


def test_empty_vocabulary():
    reply = complete_list("", "a,b")
    assert reply.suggestions == []


def test_partial_with_prefix():
    reply = complete_list(COLORS, "blue,r")
    assert reply.suggestions == ["blue,red"]


def test_leading_comma_kept():
    assert complete_list(COLORS, ",gr").suggestions == [",green"]
    assert complete_list(COLORS, ",").suggestions == [",red", ",green", ",blue"]
