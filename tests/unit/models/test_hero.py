"""
Unit tests for hero and transformation records.
"""

import pytest
from pydantic import ValidationError

from dragonball.models import Credentials, Hero, Transformation
from dragonball.models.hero import list_adapter


@pytest.mark.unit
class TestHero:

    def test_to_wire(self, goku):
        """Test the wire shape matches the service's JSON object."""
        assert goku.to_wire() == {
            "id": "1",
            "name": "Goku",
            "description": "El goku del carnaval",
            "favorite": True,
            "photo": goku.photo,
        }

    def test_records_are_immutable(self, goku):
        with pytest.raises(ValidationError):
            goku.name = "Vegeta"

    def test_equality_by_value(self, goku):
        assert Hero(**goku.to_wire()) == goku

    def test_all_fields_required(self):
        with pytest.raises(ValidationError):
            Hero(id="1", name="Goku", description="", photo="")

    def test_unknown_fields_ignored(self, goku):
        hero = Hero(**goku.to_wire(), rank=1)

        assert not hasattr(hero, "rank")


@pytest.mark.unit
class TestTransformation:

    def test_has_no_favorite(self, transformation):
        assert "favorite" not in transformation.to_wire()

    def test_list_adapter(self, transformation):
        adapter = list_adapter(Transformation)

        records = adapter.validate_python([transformation.to_wire()] * 2)

        assert records == [transformation, transformation]


@pytest.mark.unit
class TestCredentials:

    def test_password_hidden(self):
        credentials = Credentials("someone@example.com", "SomePassword")

        assert "SomePassword" not in repr(credentials)
        assert "SomePassword" not in str(credentials)
        assert "someone@example.com" not in str(credentials)
