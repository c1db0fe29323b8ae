"""Unit tests for ledger identities."""

from __future__ import annotations

import pytest

from btechaid.domain.count import create_int_count
from btechaid.domain.ledger import Resolved, Unresolved, as_identity, is_resolved
from btechaid.domain.models import Mech


def test_as_identity_from_name():
    assert as_identity("Atlas") == Unresolved("Atlas")


def test_as_identity_from_mech():
    atlas = Mech("Atlas", tonnage=100)

    identity = as_identity(atlas)

    assert identity == Resolved(atlas)
    assert identity.model == "Atlas"


def test_as_identity_passes_identities_through():
    identity = Unresolved("Atlas")

    assert as_identity(identity) is identity


def test_as_identity_rejects_other_values():
    with pytest.raises(TypeError):
        as_identity(42)


def test_identities_render_model_name():
    assert str(Unresolved("Atlas")) == "Atlas"
    assert str(Resolved(Mech("Atlas", tonnage=100))) == "Atlas"


def test_is_resolved():
    assert is_resolved(create_int_count(Resolved(Mech("Atlas", tonnage=100))))
    assert not is_resolved(create_int_count(Unresolved("Atlas")))
