# tests/unit/test_normalize_text.py
from __future__ import annotations

import pytest

from address_capture.core.normalize import clean_fragment, normalize_fragments
from address_capture.schemas.models import AddressFragments


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("  Tulsa,,  ", "Tulsa,"),
        ("5904   E\n7\tSt", "5904 E 7 St"),
        ("a,,,b", "a,b"),
        (" OK ", "OK"),
        ("", ""),
        ("   ", ""),
        ("74112", "74112"),
    ],
)
def test_clean_fragment_rules(raw: str, expected: str):
    assert clean_fragment(raw) == expected


@pytest.mark.parametrize("garbage", [None, 42, 3.5, ["Tulsa"], object()])
def test_clean_fragment_total_on_non_strings(garbage):
    assert clean_fragment(garbage) == ""


@pytest.mark.parametrize(
    "raw",
    [
        "  Tulsa,,  ",
        ", , ,,",
        " ,\n, x ,,, y\t\t",
        "5904 E 7 St,,, Tulsa ,, OK",
        "\t\n",
    ],
)
def test_clean_fragment_is_a_fixpoint(raw: str):
    once = clean_fragment(raw)
    assert clean_fragment(once) == once
    assert "  " not in once
    assert ",," not in once
    assert once == once.strip()


def test_normalize_fragments_cleans_each_role():
    raw = AddressFragments(street=" 5904  E 7 St ", city="Tulsa,,", state="\nOK\n", zip="")
    norm = normalize_fragments(raw)
    assert norm.street == "5904 E 7 St"
    assert norm.city == "Tulsa,"
    assert norm.state == "OK"
    assert norm.zip == ""
    assert not norm.is_empty()


def test_normalize_fragments_all_empty():
    assert normalize_fragments(AddressFragments()).is_empty()
